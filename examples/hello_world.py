"""
versioned_store — Hello World

One value, one file.  The schema version travels next to it, and a
migration upgrades what older releases wrote.
"""

import asyncio
import logging
import tempfile
from pathlib import Path

from pydantic import BaseModel

from versioned_store import store_of

# ─── Release 1 wrote this shape ───


class SettingsV1(BaseModel):
    dark_mode: bool = False


# ─── Release 2 reads this one ───


class Settings(BaseModel):
    theme: str
    font_size: int = 12


def migrate(version, raw):
    if version is None or version < 2:
        return Settings(theme="dark" if raw.get("dark_mode") else "light")
    return None


async def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")
    path = Path(tempfile.mkdtemp()) / "settings.json"

    # ──────────────────────────────────────
    #  1. An old release saves its settings
    # ──────────────────────────────────────
    old = store_of(path, version=1, value_type=SettingsV1, default=SettingsV1())
    await old.set(SettingsV1(dark_mode=True))
    print(f"v1 wrote: {path.read_text()}  (version {path.with_name(path.name + '.version').read_text()})")

    # ──────────────────────────────────────
    #  2. The new release reads and migrates
    # ──────────────────────────────────────
    store = store_of(
        path,
        version=2,
        value_type=Settings,
        default=Settings(theme="light"),
        migration=migrate,
    )
    settings = await store.get()
    print(f"v2 read:  {settings!r}")

    # ──────────────────────────────────────
    #  3. Migration is read-time only; write to make it durable
    # ──────────────────────────────────────
    await store.update(lambda current: current.model_copy(update={"font_size": 14}))
    print(f"v2 wrote: {path.read_text()}  (version {path.with_name(path.name + '.version').read_text()})")


if __name__ == "__main__":
    asyncio.run(main())
