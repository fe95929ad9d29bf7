import pytest

from site_videos.config import DEFAULT_OPTIONS, VideosOptions, expand_options, load_options, normalize_options


def test_empty_options_give_defaults():
    result = normalize_options({})
    assert result == VideosOptions(
        pattern="**/*.md",
        videos_directory="videos",
        authorized_exts=("mp4", "MP4", "ogg", "OGG", "webm", "WEBM"),
        videos_key="videos",
    )
    assert normalize_options(None) == DEFAULT_OPTIONS


def test_partial_override_replaces_only_given_field():
    result = normalize_options({"pattern": "test/*.md"})
    assert result.pattern == "test/*.md"
    assert result.videos_directory == DEFAULT_OPTIONS.videos_directory
    assert result.authorized_exts == DEFAULT_OPTIONS.authorized_exts
    assert result.videos_key == DEFAULT_OPTIONS.videos_key


def test_camel_case_and_snake_case_names():
    camel = normalize_options({"videosDirectory": "vids", "authorizedExts": ["mov"], "videosKey": "maps"})
    snake = normalize_options({"videos_directory": "vids", "authorized_exts": ["mov"], "videos_key": "maps"})
    assert camel == snake
    assert camel.authorized_exts == ("mov",)


def test_normalize_is_idempotent():
    once = normalize_options({"videosKey": "maps"})
    assert normalize_options(once) == once
    assert normalize_options(normalize_options({})) == DEFAULT_OPTIONS


def test_defaults_not_mutated_across_calls():
    normalize_options({"pattern": "a/*.md", "authorizedExts": ["mov"]})
    assert normalize_options({}).pattern == "**/*.md"
    assert DEFAULT_OPTIONS.authorized_exts == ("mp4", "MP4", "ogg", "OGG", "webm", "WEBM")


def test_values_are_not_validated():
    assert normalize_options({"pattern": 42}).pattern == 42


def test_unknown_option_rejected():
    with pytest.raises(TypeError):
        normalize_options({"imagesDirectory": "img"})


def test_expand_options_shapes():
    assert expand_options(None) == [DEFAULT_OPTIONS]
    assert expand_options({"videosKey": "maps"}) == [normalize_options({"videosKey": "maps"})]
    expanded = expand_options([{"pattern": "a/*.md"}, {}])
    assert [o.pattern for o in expanded] == ["a/*.md", "**/*.md"]
    with pytest.raises(TypeError):
        expand_options("**/*.md")


def test_load_options_mapping_and_list(tmp_path):
    single = tmp_path / "single.yaml"
    single.write_text("pattern: 'docs/**/*.md'\nvideosKey: clips\n", encoding="utf-8")
    assert load_options(single) == [normalize_options({"pattern": "docs/**/*.md", "videosKey": "clips"})]

    many = tmp_path / "many.yaml"
    many.write_text("- authorizedExts: [mp4]\n- videos_directory: vids\n", encoding="utf-8")
    loaded = load_options(many)
    assert loaded[0].authorized_exts == ("mp4",)
    assert loaded[1].videos_directory == "vids"

    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert load_options(empty) == [DEFAULT_OPTIONS]


def test_load_options_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_options(tmp_path / "missing.yaml")
    bad = tmp_path / "bad.yaml"
    bad.write_text("just a string\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_options(bad)
