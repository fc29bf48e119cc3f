# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the envious CLI (run via ``envious`` or ``python -m envious``)."""

from envious.cli import cli


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
