"""Limits shared by the models and the relational schema."""

# Largest value an INTEGER column holds on every supported backend (int4)
MAX_INT32 = 2**31 - 1

MAX_NAME_LENGTH = 255
