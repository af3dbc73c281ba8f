import pytest
from pydantic import ValidationError

from resource_builder.config import Settings
from resource_builder.models.report import RunReport
from resource_builder.models.resource import Category, ResourceManifest, ResourceRecord
from resource_builder.models.run import RunConfig


def test_record_serializes_with_manifest_keys():
    record = ResourceRecord(resource_identifier="a1b2c3d4.vyi", file_name="icon.vyi")
    assert record.model_dump(by_alias=True) == {
        "resourceIdentifier": "a1b2c3d4.vyi",
        "fileName": "icon.vyi",
    }
    with pytest.raises(ValidationError):
        record.file_name = "other.vyi"


def test_manifest_payload_keeps_append_order():
    manifest = ResourceManifest()
    manifest.append(Category.SOUND, ResourceRecord(resourceIdentifier="2.mp3", fileName="b.mp3"))
    manifest.append(Category.SOUND, ResourceRecord(resourceIdentifier="1.wav", fileName="a.wav"))

    payload = manifest.to_payload()

    assert [r["fileName"] for r in payload["sound"]] == ["b.mp3", "a.wav"]
    assert manifest.count() == 2
    assert len(manifest.records(Category.SOUND)) == 2


def test_run_config_is_frozen_and_validated(tmp_path):
    config = RunConfig.from_settings(Settings(), input_root=tmp_path, output_root=tmp_path / "out")
    assert config.manifest_path == tmp_path / "out" / "resource.json"
    assert config.resources_root == tmp_path / "out" / "resources"

    with pytest.raises(ValidationError):
        config.ignore_sound = True
    with pytest.raises(ValidationError):
        RunConfig(max_workers=0)


def test_report_status_transitions():
    report = RunReport.start_new(run_id="r1")
    report.finalize()
    assert report.status == "completed"
    assert report.ok

    report = RunReport.start_new()
    report.add_error(stage="copy", path="a.vyi", error="boom")
    report.finalize()
    assert report.status == "completed_with_errors"

    report = RunReport.start_new()
    report.abort("no input")
    report.finalize()
    assert report.status == "aborted"


@pytest.mark.parametrize("blank", ["", "   ", None])
def test_blank_roots_become_missing(blank):
    config = RunConfig(input_root=blank, output_root=blank)
    assert config.input_root is None
    assert config.output_root is None


def test_from_settings_keeps_blank_root_missing():
    config = RunConfig.from_settings(Settings(), input_root="", output_root="out")
    assert config.input_root is None
    assert config.output_root is not None
