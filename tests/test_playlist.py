from hlsmaster.playlist import Playlist, sort_records
from hlsmaster.playlist_parser import parse


def test_media_resources_sorted_by_bandwidth(master_text) -> None:
    playlist = parse(master_text)

    resources = playlist.get_media_resources("BANDWIDTH")

    assert [resource["BANDWIDTH"] for resource in resources] == ["222552", "77758"]


def test_sorting_ignores_prior_reorder(master_text) -> None:
    playlist = parse(master_text)
    playlist.media_resources.reverse()

    resources = playlist.get_media_resources("BANDWIDTH")

    assert [resource["BANDWIDTH"] for resource in resources] == ["222552", "77758"]


def test_values_compare_as_strings() -> None:
    playlist = Playlist(variant_streams=[{"BANDWIDTH": "900"}, {"BANDWIDTH": "1000"}])

    streams = playlist.get_variant_streams("BANDWIDTH")

    assert [stream["BANDWIDTH"] for stream in streams] == ["1000", "900"]


def test_missing_key_sorts_first() -> None:
    playlist = Playlist(media_tags=[{"NAME": "b"}, {"TYPE": "AUDIO"}, {"NAME": "a"}])

    tags = playlist.get_media_tags("NAME")

    assert tags == [{"TYPE": "AUDIO"}, {"NAME": "a"}, {"NAME": "b"}]


def test_accessor_leaves_stored_order_alone(master_text) -> None:
    playlist = parse(master_text)
    before = [dict(stream) for stream in playlist.variant_streams]

    playlist.get_variant_streams("RESOLUTION")
    playlist.get_variant_streams("BANDWIDTH")

    assert playlist.variant_streams == before


def test_accessor_returns_copies(master_text) -> None:
    playlist = parse(master_text)

    streams = playlist.get_variant_streams("uri")
    streams[0]["uri"] = "changed"
    streams.clear()

    assert "changed" not in [stream["uri"] for stream in playlist.variant_streams]
    assert len(playlist.get_variant_streams("uri")) == 3


def test_repeated_sorts_keep_record_contents(master_text) -> None:
    playlist = parse(master_text)

    by_name = playlist.get_media_tags("NAME")
    by_language = playlist.get_media_tags("LANGUAGE")

    assert sorted(by_name, key=lambda tag: tag["NAME"]) == by_name
    assert [tag["LANGUAGE"] for tag in by_language] == ["de", "en", "fr"]
    assert {tag["NAME"] for tag in by_language} == {"English", "Deutsch", "Francais"}


def test_sort_records_empty() -> None:
    assert sort_records([], "BANDWIDTH") == []
