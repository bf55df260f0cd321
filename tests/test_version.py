import json

from eksnode.version import VersionInfo, get, version_string


def test_get_has_release_tag():
    assert get().git_tag == "0.1.24"


def test_version_string_round_trip():
    assert json.loads(version_string()) == get().to_dict()


def test_version_string_pinned():
    assert version_string() == '{"BuiltAt":"","GitTag":"0.1.24"}'


def test_to_dict_omits_empty_fields():
    assert VersionInfo(built_at="123").to_dict() == {"BuiltAt": "123"}


def test_to_dict_includes_all_fields():
    info = VersionInfo(built_at="1", git_commit="abc", git_tag="0.1.0")
    assert info.to_dict() == {"BuiltAt": "1", "GitCommit": "abc", "GitTag": "0.1.0"}