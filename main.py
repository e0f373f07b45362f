"""Main entry point for the FastAPI server."""

from pes.cli import main

if __name__ == "__main__":
    main()
