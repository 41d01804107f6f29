"""Basic API — route modules under routes/ mounted onto a Chirp app.

Run with::

    python examples/basic-api/app.py

or list the routes without serving::

    prowl routes examples/basic-api --prefix /api
"""

import logging
from pathlib import Path

from chirp import App

import prowl

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

app = App()
loader = prowl.load(
    app,
    routes_folder=Path(__file__).parent / "routes",
    prefix="/api",
    exclusions=["^draft_"],
)

if __name__ == "__main__":
    for record in loader.loaded_routes:
        print(f"{', '.join(m.upper() for m in record.methods):<12} {record.route:<24} {record.name}")
    app.run()
