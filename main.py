from loguru import logger

from serialized_form.cli import app


def main() -> None:
    logger.debug("Application started")
    app()


if __name__ == "__main__":
    main()
