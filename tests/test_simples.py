from types import SimpleNamespace
import discord
import pytest

from discord_layout.simples import (
    ButtonStyle, InvalidArgument, SeparatorSpacing, enum_value,
    normalize_color, normalize_emoji, try_enum
)


class TestNormalizeColor:
    def test_int_passes_through(self) -> None:
        assert normalize_color(0xFF00FF) == 0xFF00FF

    def test_hex_string(self) -> None:
        assert normalize_color('#FF00FF') == 0xFF00FF
        assert normalize_color('ff00ff') == 0xFF00FF

    def test_rgb_sequence(self) -> None:
        assert normalize_color([255, 0, 255]) == 0xFF00FF
        assert normalize_color((0, 0x12, 0x34)) == 0x1234

    def test_discord_colour(self) -> None:
        assert normalize_color(discord.Colour.blurple()) == discord.Colour.blurple().value

    def test_none_stays_none(self) -> None:
        assert normalize_color(None) is None

    def test_zero_is_black_not_absent(self) -> None:
        assert normalize_color(0) == 0

    @pytest.mark.parametrize('value', [
        0x1000000, -1, '#1000000', 'nothex', '#F0F', 'fff', '0x00ff00',
        'ff_00_ff', ' ff00ff ', 2.5,
    ])
    def test_out_of_range_or_bad_hex(self, value) -> None:
        with pytest.raises(InvalidArgument):
            normalize_color(value)

    @pytest.mark.parametrize('value', [
        [1, 2], (1, 2, 3, 4), [256, 0, 0], ['ff', 0, 0], [True, 0, 0], [1.0, 0, 0],
    ])
    def test_bad_sequences(self, value) -> None:
        with pytest.raises(InvalidArgument):
            normalize_color(value)

    def test_bool_rejected(self) -> None:
        with pytest.raises(InvalidArgument):
            normalize_color(True)


class TestNormalizeEmoji:
    def test_custom_id(self) -> None:
        assert normalize_emoji(123) == {'id': 123}
        assert normalize_emoji('123') == {'id': 123}

    def test_unicode(self) -> None:
        assert normalize_emoji('\N{GRINNING FACE}') == {'name': '\N{GRINNING FACE}'}

    def test_none_stays_none(self) -> None:
        assert normalize_emoji(None) is None

    def test_emoji_objects(self) -> None:
        assert normalize_emoji(discord.PartialEmoji(name='x', id=42)) == {'id': 42}
        assert normalize_emoji(discord.PartialEmoji(name='\N{FIRE}')) == {'name': '\N{FIRE}'}

    def test_wire_dict_drops_nulls(self) -> None:
        assert normalize_emoji({'id': None, 'name': 'a'}) == {'name': 'a'}

    def test_unusable(self) -> None:
        with pytest.raises(InvalidArgument):
            normalize_emoji(0)
        with pytest.raises(InvalidArgument):
            normalize_emoji(SimpleNamespace(id=None, name=None))


class TestEnums:
    def test_enum_value_by_name(self) -> None:
        assert enum_value(ButtonStyle, 'danger') == 4
        assert enum_value(SeparatorSpacing, SeparatorSpacing.LARGE) == 2
        assert enum_value(SeparatorSpacing, None) is None

    def test_enum_value_bad_name(self) -> None:
        with pytest.raises(InvalidArgument):
            enum_value(ButtonStyle, 'blurple')

    def test_try_enum_keeps_new_values(self) -> None:
        assert try_enum(ButtonStyle, 1) is ButtonStyle.PRIMARY
        assert try_enum(ButtonStyle, 99) == 99
