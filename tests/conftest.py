import pytest


@pytest.fixture
def dist(tmp_path):
    """A build tree laid out like <project>/ui/dist"""
    build_root = tmp_path / "ui" / "dist"
    build_root.mkdir(parents=True)
    (build_root / "index.html").write_text("<!doctype html><div id=app></div>", encoding="utf-8")
    (build_root / "index.js").write_text("console.log('hi');", encoding="utf-8")
    (build_root / "index.js.map").write_text("{}", encoding="utf-8")
    (build_root / "bundle.css").write_text("body{margin:0}", encoding="utf-8")
    return build_root
