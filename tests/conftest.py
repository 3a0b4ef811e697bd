from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest
from hypothesis import settings

from helpers import make_report

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

settings.register_profile("covowners", deadline=None, max_examples=200)
settings.load_profile("covowners")

SAMPLE_MAINTAINERS = """\
Descriptions of section entries:

\tM: Maintainer Full name and E-mail address: Full Name <address@domain>
\tF: Files and directories with wildcard patterns.
\tE: Excluded files and directories.
\tI: single word component identifier

\tMaintainers List (try to look for most precise areas first)

\t-----------------------------------
Build System
I:\tbuild
M:\tDamjan Marion <damarion@example.com>
F:\tMakefile
F:\tsrc/CMakeLists.txt
F:\tsrc/cmake/

VNET Bidirectional Forwarding Detection (BFD)
I:\tbfd
M:\tKlement Sekera <ksekera@example.com>
F:\tsrc/vnet/bfd/
C:\tlegacy owners moved out in 2020

Plugin - ACL
I:\tacl
M:\tAndrew Yourtchenko <ayourtch@example.com>
M:\tvpp-dev Mailing List <vpp-dev@example.com>
F:\tsrc/plugins/acl/
E:\tsrc/plugins/acl/test/
Y:\tsrc/plugins/acl/FEATURE.yaml

VNET
I:\tvnet
M:\tDamjan Marion <damarion@example.com>
F:\tsrc/vnet/*.c
"""


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture
def maintainers_text() -> str:
    return SAMPLE_MAINTAINERS


@pytest.fixture
def maintainers_file(tmp_path: Path) -> Path:
    path = tmp_path / "MAINTAINERS"
    path.write_text(SAMPLE_MAINTAINERS, encoding="utf-8")
    return path


@pytest.fixture
def write_report(tmp_path: Path) -> Callable[[list[dict[str, object]]], Path]:
    def _write(rows: list[dict[str, object]]) -> Path:
        path = tmp_path / "report.json"
        path.write_text(json.dumps(make_report(rows)), encoding="utf-8")
        return path

    return _write
