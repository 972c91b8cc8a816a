from pathlib import Path

import pytest

PACKAGES_INDEX = """\
Package: bitcoind
Version: 25.0-1
Installed-Size: 20480
Maintainer: Jörg Example <jorg@example.org>
Architecture: amd64
Depends: libc6 (>= 2.34), libevent-2.1-7 (>= 2.1.8-stable),
 libsqlite3-0 (>= 3.7.15)
Priority: optional
Description: peer-to-peer network based digital currency - daemon
 Bitcoin is a free open source peer-to-peer electronic cash system that
 is completely decentralized.
 .
 This package provides the daemon, bitcoind.
SHA256: 0f1e2d3c4b5a69788796a5b4c3d2e1f00f1e2d3c4b5a69788796a5b4c3d2e1f0

Package: lightning
Version: 23.08-1
Installed-Size: 4096
Maintainer: Some One <someone@example.org>
Architecture: amd64
Depends: bitcoind
Priority: optional
Description: The payment rail
SHA256: 00112233445566778899aabbccddeeff00112233445566778899aabbccddeeff
"""

CONTROL_FILE = """\
Source: foo
Section: net
Priority: optional
Maintainer: Some One <someone@example.org>
Build-Depends: debhelper-compat (= 13)

Package: foo
Architecture: any
Depends: ${shlibs:Depends}, ${misc:Depends}
Description: The Foo
 Does foo things.
"""


@pytest.fixture(scope="module")
def index_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Write sample apt index and control files once per module."""
    dir_path: Path = tmp_path_factory.mktemp("lists")

    (dir_path / "Packages").write_text(PACKAGES_INDEX, encoding="utf-8")
    (dir_path / "control").write_bytes(CONTROL_FILE.replace("\n", "\r\n").encode())
    (dir_path / "broken").write_text("Package: foo\nnot a field\n", encoding="utf-8")

    return dir_path
