#!/usr/bin/env python3
"""Entry point: spawns the marak.com website from ./public and ./view."""

from pathlib import Path
from typing import Optional

from website import SiteConfig, spawn

SITE_NAME = "website"
DOMAIN = "marak.com"
BASE_DIR = Path(__file__).resolve().parent


def build_config(base_dir: Optional[Path] = None) -> SiteConfig:
    base_dir = base_dir or BASE_DIR
    return SiteConfig(
        domain=DOMAIN,
        root=base_dir / "public",
        view=base_dir / "view",
    )


def main() -> None:
    spawn(SITE_NAME, build_config())


if __name__ == "__main__":
    main()
