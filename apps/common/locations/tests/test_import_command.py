import logging
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.common.locations.models import Province, District, Tehsil


pytestmark = pytest.mark.django_db


def run_command(*args, **options):
    stdout, stderr = StringIO(), StringIO()
    call_command("import_pakistan_locations", *args, stdout=stdout, stderr=stderr, **options)
    return stdout.getvalue(), stderr.getvalue()


def test_command_imports_file(write_location_file, backup_dir, punjab_payload):
    path = write_location_file(punjab_payload)

    out, err = run_command(file=str(path), backup_dir=str(backup_dir))

    assert err == ""
    assert "Successfully imported: 1 provinces, 1 districts, 2 tehsils" in out
    assert "Total in database: 1 provinces, 1 districts, 2 tehsils" in out
    assert len(list(backup_dir.glob("*.json"))) == 3


def test_command_rerun_reports_reuse(write_location_file, backup_dir, punjab_payload):
    path = write_location_file(punjab_payload)
    run_command(file=str(path), backup_dir=str(backup_dir))

    out, _ = run_command(file=str(path), backup_dir=str(backup_dir))

    assert "Successfully imported: 0 provinces, 0 districts, 0 tehsils" in out
    assert "Reused: 1 provinces, 1 districts; skipped 2 tehsils" in out
    assert Tehsil.objects.count() == 2


def test_command_uses_settings_paths_without_arguments(settings, write_location_file, backup_dir, punjab_payload):
    settings.LOCATION_DATA_FILE = write_location_file(punjab_payload)
    settings.LOCATION_BACKUP_DIR = backup_dir

    out, _ = run_command()

    assert "Successfully imported" in out
    assert Province.objects.get().slug == "punjab"
    assert backup_dir.is_dir()


def test_command_missing_file_aborts(tmp_path, backup_dir, caplog):
    caplog.set_level(logging.ERROR, logger="apps.locations")

    with pytest.raises(CommandError, match="Pakistan location data file not found."):
        run_command(file=str(tmp_path / "missing.json"), backup_dir=str(backup_dir))

    errors = [r.getMessage() for r in caplog.records if r.name == "apps.locations"]
    assert errors == ["Location import aborted: [LOCATION_FILE_NOT_FOUND] Pakistan location data file not found."]
    assert not backup_dir.exists()
    assert Province.objects.count() == 0


def test_command_malformed_file_aborts(tmp_path, backup_dir, caplog):
    path = tmp_path / "locations.json"
    path.write_text('{"districts": []}', encoding="utf-8")
    caplog.set_level(logging.ERROR, logger="apps.locations")

    with pytest.raises(CommandError) as exc_info:
        run_command(file=str(path), backup_dir=str(backup_dir))

    assert str(exc_info.value) == 'Invalid JSON structure: "provinces" array not found.'
    assert any(
        r.levelno == logging.ERROR and "INVALID_LOCATION_DATA" in r.getMessage()
        for r in caplog.records
        if r.name == "apps.locations"
    )
    assert not backup_dir.exists()


def test_command_dry_run_counts_without_writing(write_location_file, backup_dir):
    path = write_location_file([
        {
            "name": "Punjab",
            "districts": [
                {"name": "Lahore", "tehsils": ["Model Town", "Raiwind"]},
                {"name": "Kasur", "tehsils": ["Chunian"]},
            ],
        },
        {"name": "Islamabad Capital Territory"},
    ])

    out, _ = run_command(file=str(path), backup_dir=str(backup_dir), dry_run=True)

    assert "Found 2 provinces" in out
    assert "Found 2 districts" in out
    assert "Found 3 tehsils" in out
    assert Province.objects.count() == 0
    assert not backup_dir.exists()


def test_command_stats():
    punjab = Province.objects.create(name="Punjab", slug="punjab")
    lahore = District.objects.create(name="Lahore", slug="lahore", province=punjab)
    Tehsil.objects.create(name="Raiwind", slug="raiwind", district=lahore)

    out, _ = run_command(stats=True)

    assert "Current database: 1 provinces, 1 districts, 1 tehsils" in out
