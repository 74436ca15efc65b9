"""Entry point for running the Complex Polar Lab UI."""

from polarlab.app import main


if __name__ in {"__main__", "__mp_main__"}:
    main()
