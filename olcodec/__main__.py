"""Entry point for `python -m olcodec`."""


def main() -> None:
    """Run the CLI application."""
    try:
        from olcodec import __app_name__, cli
    except ImportError as exc:
        raise ImportError(
            f"Missing optional dependency required for the CLI ({exc.name})."
            " Please install required packages using `pip install olcodec[cli]`."
        ) from exc

    cli.app(prog_name=__app_name__.lower())  # pragma: no cover


if __name__ == "__main__":  # pragma: no cover
    main()
