"""Entry point: python -m bindgen

Same as the ``bindgen`` console script.
"""

from .cli import app


def main() -> None:
    app(prog_name="bindgen")


if __name__ == "__main__":
    main()
