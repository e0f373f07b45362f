import logging

from pes.config import Config


def main():
    """Entry point for api command for production use case."""
    import uvicorn

    settings = Config.get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("pes.api.app:app", host="0.0.0.0", port=settings.port)


def dev():
    import subprocess

    subprocess.run(
        [
            "fastapi",
            "run",
            "--host",
            "localhost",
            "--port",
            "8080",
            "pes/api/app.py",
            "--reload",
        ]
    )


if __name__ == "__main__":
    main()
