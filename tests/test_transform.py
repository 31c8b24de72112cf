"""Tests for provider URL, srcset and content width construction."""

import pytest

from edge_images import (
    ContentWidthConstraint,
    Dimensions,
    EngineConfig,
    ImageSource,
    InvalidDimension,
    InvalidSourceURL,
    InvalidTransform,
    TransformRequest,
    build_default_srcset_ladder,
    build_srcset_entry,
    build_transformed_url,
    cf_src,
    constrain_to_content_width,
)

from .conftest import PHOTO_URL

EXPECTED_PHOTO_URL = (
    "https://example.com/cdn-cgi/image/"
    "f=auto%2Cfit=contain%2Cgravity=auto%2Cheight=600%2Conerror=redirect%2Cwidth=800"
    "/photo.jpg"
)


def test_end_to_end_url(engine_config):
    url = build_transformed_url(
        ImageSource(PHOTO_URL), TransformRequest(width=800, height=600, fit="contain"), engine_config
    )
    assert str(url) == EXPECTED_PHOTO_URL
    assert url.provider_prefix == "https://example.com/cdn-cgi/image/"
    assert url.path == "/photo.jpg"


def test_same_input_same_output(engine_config):
    source = ImageSource(PHOTO_URL)
    request = TransformRequest(width=640, height=480, fit="cover")
    first = build_transformed_url(source, request, engine_config)
    second = build_transformed_url(source, request, engine_config)
    assert str(first) == str(second)
    assert first == second


@pytest.mark.parametrize("height", [None, 0, 300])
def test_keys_strictly_ascending(engine_config, height):
    url = build_transformed_url(
        ImageSource(PHOTO_URL), TransformRequest(width=800, height=height), engine_config
    )
    keys = [key for key, _ in url.query]
    assert keys == sorted(keys)
    assert len(keys) == len(set(keys))


def test_required_params_always_present(engine_config):
    url = build_transformed_url(ImageSource(PHOTO_URL), TransformRequest(width=800), engine_config)
    assert url.params() == {
        "f": "auto",
        "fit": "contain",
        "gravity": "auto",
        "onerror": "redirect",
        "width": "800",
    }


@pytest.mark.parametrize("height", [None, 0])
def test_missing_height_is_omitted(engine_config, height):
    url = build_transformed_url(
        ImageSource(PHOTO_URL), TransformRequest(width=800, height=height), engine_config
    )
    assert "height" not in url.params()
    assert "height=" not in str(url)


def test_query_and_fragment_dropped(engine_config):
    url = build_transformed_url(
        ImageSource("https://example.com/img.jpg?ver=3#frag"),
        TransformRequest(width=800),
        engine_config,
    )
    assert url.path == "/img.jpg"
    assert str(url).endswith("width=800/img.jpg")
    assert "ver=3" not in str(url)


def test_source_host_is_replaced_by_provider():
    config = EngineConfig(provider_host="https://cdn.example.org/")
    url = cf_src("https://origin.example.net/wp-content/uploads/a.png", 400, config=config)
    assert url.startswith("https://cdn.example.org/cdn-cgi/image/")
    assert url.endswith("/wp-content/uploads/a.png")
    assert "origin.example.net" not in url


def test_list_values_use_encoded_comma(engine_config):
    request = TransformRequest(width=800, extra={"trim": [10, 20]})
    url = build_transformed_url(ImageSource(PHOTO_URL), request, engine_config)
    assert ("trim", "10%2C20") in url.query


def test_values_are_percent_encoded(engine_config):
    request = TransformRequest(width=800, extra={"background": "#fff"})
    url = build_transformed_url(ImageSource(PHOTO_URL), request, engine_config)
    assert url.params()["background"] == "%23fff"


@pytest.mark.parametrize("url", ["", "   ", "https://example.com", "https://example.com/", "http://[::1"])
def test_invalid_source_url(engine_config, url):
    with pytest.raises(InvalidSourceURL):
        build_transformed_url(ImageSource(url), TransformRequest(width=800), engine_config)


@pytest.mark.parametrize("width", [0, -100])
def test_invalid_width(engine_config, width):
    with pytest.raises(InvalidDimension):
        build_transformed_url(ImageSource(PHOTO_URL), TransformRequest(width=width), engine_config)


def test_negative_height(engine_config):
    with pytest.raises(InvalidDimension):
        build_transformed_url(
            ImageSource(PHOTO_URL), TransformRequest(width=800, height=-1), engine_config
        )


def test_unknown_fit():
    with pytest.raises(InvalidTransform):
        TransformRequest(width=800, fit="stretch")


def test_srcset_entry(engine_config):
    entry = build_srcset_entry(ImageSource(PHOTO_URL), 800, 600, engine_config)
    assert str(entry) == f"{EXPECTED_PHOTO_URL} 800w"
    assert entry.descriptor_width == 800


def test_ladder_bounds(engine_config):
    ladder = build_default_srcset_ladder(ImageSource(PHOTO_URL, 5000), config=engine_config)
    widths = [entry.descriptor_width for entry in ladder]
    assert widths == list(range(400, 2401, 100))
    assert len(widths) == 21
    assert len(set(widths)) == len(widths)


def test_ladder_is_restartable(engine_config):
    ladder = build_default_srcset_ladder(ImageSource(PHOTO_URL, 900, 600), config=engine_config)
    first = [str(entry) for entry in ladder]
    second = [str(entry) for entry in ladder]
    assert first == second
    assert len(first) == len(ladder) == 6


def test_ladder_collapses_for_small_images(engine_config):
    ladder = build_default_srcset_ladder(ImageSource(PHOTO_URL, 250), config=engine_config)
    assert [entry.descriptor_width for entry in ladder] == [250]


def test_ladder_without_intrinsic_width(engine_config):
    ladder = build_default_srcset_ladder(ImageSource(PHOTO_URL), config=engine_config)
    assert ladder.widths[0] == 400
    assert ladder.widths[-1] == 2400


def test_ladder_heights_follow_aspect_ratio(engine_config, photo):
    entries = list(build_default_srcset_ladder(photo, config=engine_config))
    assert entries[0].url.params()["height"] == "267"
    assert entries[-1].descriptor_width == 1200
    assert entries[-1].url.params()["height"] == "800"


def test_ladder_sizes_use_constraint(engine_config, photo):
    ladder = build_default_srcset_ladder(photo, ContentWidthConstraint(500), engine_config)
    assert ladder.sizes == "(max-width: 500px) 100vw, 500px"
    assert str(ladder).startswith("https://example.com/cdn-cgi/image/")
    assert str(ladder).count(", ") == len(ladder) - 1


def test_ladder_respects_config_step():
    config = EngineConfig(width_min=200, width_max=1000, width_step=400)
    ladder = build_default_srcset_ladder(ImageSource(PHOTO_URL, 5000), config=config)
    assert ladder.widths == [200, 600, 1000]


def test_constrain_scales_down():
    assert constrain_to_content_width(1200, 800, 600) == Dimensions(600, 400)


def test_constrain_rounds_height():
    assert constrain_to_content_width(1000, 333, 600) == Dimensions(600, 200)
    assert constrain_to_content_width(800, 1, 600) == Dimensions(600, 1)


def test_constrain_leaves_narrow_images():
    assert constrain_to_content_width(500, 300, 600) == Dimensions(500, 300)
    assert constrain_to_content_width(600, 300, 600) == Dimensions(600, 300)


@pytest.mark.parametrize("width", [0, -1])
def test_constrain_rejects_bad_width(width):
    with pytest.raises(InvalidDimension):
        constrain_to_content_width(width, 100, 600)


def test_ladder_rejects_negative_height_up_front(engine_config):
    with pytest.raises(InvalidDimension, match="intrinsic_height"):
        build_default_srcset_ladder(ImageSource(PHOTO_URL, 1200, -800), config=engine_config)
