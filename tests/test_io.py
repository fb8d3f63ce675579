import json

import yaml

from fireconfig.core.utils.io import dump_structured, save_json


def test_save_json_creates_parent_dirs(tmp_path):
    target = tmp_path / "nested" / "template.json"
    save_json(target, {"etag": "e", "name": "café"})

    text = target.read_text(encoding="utf-8")
    assert json.loads(text) == {"etag": "e", "name": "café"}
    assert text.endswith("\n")
    assert "café" in text


def test_dump_structured_formats():
    payload = {"b": 1, "a": [1, 2]}
    assert json.loads(dump_structured(payload)) == payload
    text = dump_structured(payload, "yaml")
    assert yaml.safe_load(text) == payload
    assert text.index("b:") < text.index("a:")
