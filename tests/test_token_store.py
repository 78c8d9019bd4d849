import logging
import threading

import pytest

from corpo_tokens.config.validators import InvalidConfigurationError
from corpo_tokens.models.colors import BLACK, WHITE, Color
from corpo_tokens.tokens.store import DesignTokens, TokenStore, get_token_store


def test_defaults() -> None:
    store = TokenStore()
    assert store.base_spacing == 4
    assert store.spacing_4x == 16
    assert store.base_font_size == 14
    assert store.font_size_small == pytest.approx(12.25)
    assert store.border_radius == 8
    assert store.border_radius_small == 4
    assert store.border_radius_large == 16
    assert store.font_family == "Inter"
    assert store.primary_color == Color.from_hex("#3182CE")


def test_background_is_alias_of_surface() -> None:
    store = TokenStore()
    store.configure(surface_color="#1A1A1A")
    assert store.background_color == Color.from_hex("#1A1A1A")


def test_configure_is_partial() -> None:
    store = TokenStore()
    before = store.snapshot()
    store.configure(primary_color="#7C3AED")
    assert store.primary_color == Color.from_hex("#7C3AED")
    assert store.secondary_color == before.secondary_color
    assert store.base_spacing == before.base_spacing
    assert store.font_family == before.font_family


def test_configure_without_values_is_noop() -> None:
    store = TokenStore()
    before = store.snapshot()
    assert store.configure() is before
    assert store.snapshot() is before


def test_spacing_scale_follows_base_spacing() -> None:
    store = TokenStore()
    store.configure(base_spacing=6)
    assert store.spacing_2x == 12
    assert store.spacing_8x == 48
    assert store.spacing_16x == 96
    assert store.spacing(5) == 30


def test_font_scale_follows_base_font_size() -> None:
    store = TokenStore()
    store.configure(base_font_size=16)
    assert store.font_size_small == 14
    assert store.font_size_large == 18
    assert store.font_size_xlarge == 20
    assert store.font_size_xxlarge == 24


def test_configure_accepts_argb_and_color_values() -> None:
    store = TokenStore()
    store.configure(primary_color=0xFF000000, text_primary=WHITE)
    assert store.primary_color == BLACK
    assert store.text_primary == WHITE


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("base_spacing", -1),
        ("base_spacing", 0),
        ("base_font_size", float("nan")),
        ("border_radius", -0.5),
        ("font_family", "   "),
        ("primary_color", "not-a-color"),
        ("base_spacing", True),
        ("unknown_token", 1),
    ],
)
def test_configure_rejects_invalid_values(field: str, value) -> None:
    store = TokenStore()
    with pytest.raises(InvalidConfigurationError) as exc_info:
        store.configure(**{field: value})
    assert exc_info.value.field == field


def test_failed_configure_leaves_state_untouched() -> None:
    store = TokenStore()
    before = store.snapshot()
    with pytest.raises(InvalidConfigurationError):
        store.configure(primary_color="#000000", base_spacing=-4)
    assert store.snapshot() == before


def test_snapshot_is_immutable_across_writes() -> None:
    store = TokenStore()
    old = store.snapshot()
    store.configure(base_spacing=10)
    assert old.base_spacing == 4
    assert store.snapshot().base_spacing == 10


def test_reset_to_defaults() -> None:
    store = TokenStore()
    store.configure(base_spacing=10, font_family="Poppins")
    store.reset_to_defaults()
    assert store.snapshot() == DesignTokens()


def test_update_with_reset_starts_from_defaults() -> None:
    store = TokenStore()
    store.configure(success_color="#000000")
    store.update({"primary_color": "#FF0000"}, reset=True)
    assert store.success_color == DesignTokens().success_color
    assert store.primary_color == Color(255, 0, 0)


def test_text_color_for_picks_side_of_threshold() -> None:
    store = TokenStore()
    assert store.text_color_for(WHITE) == store.text_primary
    assert store.text_color_for("#000000") == WHITE
    assert store.text_color_for(store.primary_color) == WHITE


def test_primary_variants_shift_lightness() -> None:
    store = TokenStore()
    _, _, base = store.primary_color.to_hsl()
    assert store.primary_light().to_hsl()[2] == pytest.approx(base + 0.2, abs=0.01)
    assert store.primary_dark().to_hsl()[2] == pytest.approx(base - 0.2, abs=0.01)


def test_to_dict_serializes_colors_and_derived_values() -> None:
    payload = DesignTokens().to_dict(include_derived=True)
    assert payload["primary_color"] == "#3182CE"
    assert payload["background_color"] == "#FFFFFF"
    assert payload["spacing_16x"] == 64
    assert payload["font_size_small"] == pytest.approx(12.25)
    assert "primary_light" in payload
    assert "spacing_16x" not in DesignTokens().to_dict()


def test_configure_logs_changed_fields(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="corpo_tokens.tokens.store")
    TokenStore().configure(base_spacing=5, font_family="Lato")
    record = next(r for r in caplog.records if r.name == "corpo_tokens.tokens.store")
    assert record.context["fields"] == ["base_spacing", "font_family"]


def test_concurrent_writers_never_expose_torn_snapshots() -> None:
    store = TokenStore(DesignTokens(base_spacing=8.0))
    torn: list[tuple[float, float]] = []
    stop = threading.Event()

    def writer(value: int) -> None:
        for _ in range(200):
            store.configure(base_spacing=value, border_radius=value)

    def reader() -> None:
        while not stop.is_set():
            snap = store.snapshot()
            if snap.base_spacing != snap.border_radius:
                torn.append((snap.base_spacing, snap.border_radius))

    readers = [threading.Thread(target=reader) for _ in range(2)]
    writers = [threading.Thread(target=writer, args=(n,)) for n in (1, 2, 3, 4)]
    for thread in readers + writers:
        thread.start()
    for thread in writers:
        thread.join()
    stop.set()
    for thread in readers:
        thread.join()

    assert not torn
    assert store.base_spacing == store.border_radius


def test_default_store_is_a_lazy_singleton() -> None:
    store = get_token_store()
    try:
        assert get_token_store() is store
        store.configure(font_family="Poppins")
        assert get_token_store().font_family == "Poppins"
    finally:
        store.reset_to_defaults()


def test_private_attributes_are_not_delegated() -> None:
    with pytest.raises(AttributeError):
        TokenStore()._missing


def test_assigning_a_field_goes_through_configure() -> None:
    store = TokenStore()
    store.base_spacing = 6
    assert store.snapshot().base_spacing == 6
    assert store.spacing_2x == 12

    store.configure(base_spacing=10)
    assert store.base_spacing == store.snapshot().base_spacing == 10
    assert store.spacing_2x == 20


def test_assigning_an_invalid_field_value_is_rejected() -> None:
    store = TokenStore()
    with pytest.raises(InvalidConfigurationError):
        store.base_spacing = -1
    assert store.base_spacing == 4.0


def test_assigning_a_derived_value_is_rejected() -> None:
    store = TokenStore()
    with pytest.raises(AttributeError):
        store.spacing_2x = 99
    assert store.spacing_2x == 8.0
