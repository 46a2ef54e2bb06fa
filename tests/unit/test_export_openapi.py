import json
from pathlib import Path

from scripts.export_openapi import main


def test_export_writes_registration_and_user_paths(tmp_path: Path) -> None:
    destination = tmp_path / "api" / "openapi.json"

    main([str(destination)])

    schema = json.loads(destination.read_text())
    assert "/auth/register" in schema["paths"]
    assert "/users/{user_id}" in schema["paths"]
    assert "/users/me" in schema["paths"]
