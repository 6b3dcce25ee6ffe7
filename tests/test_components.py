import pytest

from discord_layout.simples import (
    ButtonStyle, ComponentType, LoadingState, MalformedPayload,
    SeparatorSpacing, UnknownComponentType
)
from discord_layout.components import (
    TYPE_CLASSES, ActionRow, Button, ChannelSelect, Container, File,
    MediaGallery, MessageComponent, Section, SelectMenu, Separator,
    TextDisplay, TextInput, Thumbnail, UnfurledMedia, parse_components
)

CONTAINER = {
    'type': 17,
    'id': 1,
    'accent_color': 0x5865F2,
    'spoiler': False,
    'components': [
        {'type': 10, 'id': 2, 'content': '# Title'},
        {
            'type': 9, 'id': 3,
            'components': [{'type': 10, 'id': 4, 'content': 'beside'}],
            'accessory': {
                'type': 11, 'id': 5, 'description': 'logo',
                'media': {
                    'url': 'https://example.com/a.png',
                    'proxy_url': 'https://media.example.com/a.png',
                    'width': 64, 'height': 64,
                    'content_type': 'image/png', 'loading_state': 2,
                },
            },
        },
        {'type': 14, 'id': 6, 'divider': True, 'spacing': 2},
        {
            'type': 12, 'id': 7,
            'items': [{'media': {'url': 'https://example.com/b.png'},
                       'spoiler': True}],
        },
        {
            'type': 13, 'id': 8, 'name': 'log.txt', 'size': 12,
            'file': {'url': 'attachment://log.txt'},
        },
        {
            'type': 1, 'id': 9,
            'components': [
                {'type': 2, 'id': 10, 'style': 1, 'label': 'Go',
                 'custom_id': 'go', 'emoji': {'name': '\N{FIRE}'}},
                {'type': 2, 'id': 11, 'style': 5, 'label': 'Docs',
                 'url': 'https://example.com'},
            ],
        },
    ],
}


class TestParse:
    def test_container_tree(self) -> None:
        container = MessageComponent.from_dict(CONTAINER)
        assert isinstance(container, Container)
        assert container.colour.value == 0x5865F2
        text, section, sep, gallery, file, row = container.components
        assert isinstance(text, TextDisplay) and text.text == '# Title'
        assert isinstance(section, Section) and section.is_thumbnail
        assert section.accessory.media.loaded
        assert section.accessory.media.loading_state is LoadingState.LOADED
        assert sep.spacing is SeparatorSpacing.LARGE
        assert isinstance(gallery, MediaGallery) and gallery.items[0].spoiler
        assert isinstance(file, File) and file.name == 'log.txt' and file.size == 12
        assert isinstance(row, ActionRow)
        assert [b.style for b in row.buttons] == [ButtonStyle.PRIMARY, ButtonStyle.LINK]
        assert row.buttons[0].partial_emoji.name == '\N{FIRE}'
        assert row.buttons[1].is_link

    def test_round_trip(self) -> None:
        container = MessageComponent.from_dict(CONTAINER)
        again = MessageComponent.from_dict(container.to_dict())
        assert again == container

    def test_server_only_media_fields_not_serialized(self) -> None:
        container = MessageComponent.from_dict(CONTAINER)
        thumb = container.components[1].accessory.to_dict()
        assert thumb['media'] == {'url': 'https://example.com/a.png'}

    def test_file_server_fields_not_serialized(self) -> None:
        file = MessageComponent.from_dict(CONTAINER['components'][4])
        assert 'name' not in file.to_dict()

    def test_select_menus(self) -> None:
        row = MessageComponent.from_dict({'type': 1, 'components': [{
            'type': 3, 'custom_id': 'pick', 'max_values': 2,
            'options': [{'label': 'A', 'value': 'a', 'default': True}],
        }]})
        select = row.select_menus[0]
        assert isinstance(select, SelectMenu)
        assert select.options[0].default is True
        channels = MessageComponent.from_dict(
            {'type': 8, 'custom_id': 'c', 'channel_types': [0, 2]})
        assert isinstance(channels, ChannelSelect)
        assert channels.to_dict()['channel_types'] == [0, 2]

    def test_text_input(self) -> None:
        comp = MessageComponent.from_dict(
            {'type': 4, 'custom_id': 'name', 'style': 2, 'value': 'hi'})
        assert isinstance(comp, TextInput) and comp.is_paragraph
        assert comp.value == 'hi'


class TestMalformed:
    def test_missing_type(self) -> None:
        with pytest.raises(MalformedPayload) as info:
            MessageComponent.from_dict({'content': 'x'})
        assert info.value.field == 'type'

    def test_missing_required_field(self) -> None:
        with pytest.raises(MalformedPayload) as info:
            MessageComponent.from_dict({'type': 10})
        assert info.value.component_type == ComponentType.TEXT_DISPLAY
        assert info.value.field == 'content'

    def test_missing_media_url(self) -> None:
        with pytest.raises(MalformedPayload) as info:
            MessageComponent.from_dict({'type': 11, 'media': {}})
        assert info.value.field == 'url'

    @pytest.mark.parametrize('accessory', [
        {'type': 10, 'content': 'not allowed'},
        {'type': 3, 'custom_id': 'x'},
    ])
    def test_section_accessory_type(self, accessory) -> None:
        with pytest.raises(MalformedPayload) as info:
            MessageComponent.from_dict({
                'type': 9, 'accessory': accessory,
                'components': [{'type': 10, 'content': 'hi'}],
            })
        assert info.value.field == 'accessory'

    def test_section_unknown_accessory_in_strict_mode(self) -> None:
        with pytest.raises(MalformedPayload) as info:
            MessageComponent.from_dict({
                'type': 9, 'accessory': {'type': 999},
                'components': [],
            }, strict=True)
        assert info.value.field == 'accessory'

    def test_section_children_must_be_text(self) -> None:
        with pytest.raises(MalformedPayload):
            MessageComponent.from_dict({
                'type': 9,
                'accessory': {'type': 11, 'media': {'url': 'https://e.com/a.png'}},
                'components': [{'type': 14}],
            })

    def test_action_row_children_must_be_interactive(self) -> None:
        with pytest.raises(MalformedPayload):
            MessageComponent.from_dict(
                {'type': 1, 'components': [{'type': 10, 'content': 'x'}]})


class TestUnknownTypes:
    PAYLOAD = {
        'type': 17,
        'components': [
            {'type': 10, 'content': 'a'},
            {'type': 999, 'whatever': True},
            {'type': 14},
        ],
    }

    def test_lenient_drops_unknown(self) -> None:
        container = MessageComponent.from_dict(self.PAYLOAD)
        assert len(container.components) == len(self.PAYLOAD['components']) - 1

    def test_strict_raises(self) -> None:
        with pytest.raises(UnknownComponentType) as info:
            MessageComponent.from_dict(self.PAYLOAD, strict=True)
        assert info.value.value == 999

    def test_top_level(self) -> None:
        assert MessageComponent.from_dict({'type': 999}) is None
        assert parse_components([{'type': 999}, {'type': 14}]) == [Separator()]


def test_every_component_type_has_a_class() -> None:
    assert set(TYPE_CLASSES) == set(ComponentType)
    for ctype, cls in TYPE_CLASSES.items():
        assert cls.type == ctype


class TestSerialize:
    def test_unset_fields_omitted(self) -> None:
        assert Separator().to_dict() == {'type': 14}
        assert Button(ButtonStyle.PRIMARY, label='x', custom_id='y').to_dict() == {
            'type': 2, 'style': 1, 'label': 'x', 'custom_id': 'y'}
        assert Container().to_dict() == {'type': 17, 'components': []}

    def test_file_name_becomes_attachment(self) -> None:
        assert File('report.pdf').file.url == 'attachment://report.pdf'
        assert File('https://e.com/x').file.url == 'https://e.com/x'

    def test_media_coercion(self) -> None:
        thumb = Thumbnail(UnfurledMedia('https://e.com/a.png'))
        assert thumb == Thumbnail('https://e.com/a.png')

    def test_action_row_forms(self) -> None:
        a = Button(ButtonStyle.SECONDARY, label='a', custom_id='a')
        b = Button(ButtonStyle.SECONDARY, label='b', custom_id='b')
        assert ActionRow(a, b) == ActionRow([a, b])
        assert len(ActionRow(a, b)) == 2


IMAGE = 'https://example.com/a.png'

MINIMAL = {
    1: {'type': 1, 'components': []},
    2: {'type': 2, 'style': 1, 'label': 'B', 'custom_id': 'b'},
    3: {'type': 3, 'custom_id': 's', 'options': []},
    4: {'type': 4, 'custom_id': 't'},
    5: {'type': 5, 'custom_id': 'u'},
    6: {'type': 6, 'custom_id': 'r'},
    7: {'type': 7, 'custom_id': 'm'},
    8: {'type': 8, 'custom_id': 'c'},
    9: {'type': 9, 'components': [], 'accessory': {'type': 11, 'media': {'url': IMAGE}}},
    10: {'type': 10, 'content': 'x'},
    11: {'type': 11, 'media': {'url': IMAGE}},
    12: {'type': 12, 'items': []},
    13: {'type': 13, 'file': {'url': 'attachment://a.txt'}},
    14: {'type': 14},
    17: {'type': 17, 'components': []},
}

LINK = {'type': 2, 'id': 21, 'style': 5, 'label': 'Docs', 'url': 'https://e.com',
        'emoji': {'id': 123, 'name': 'docs', 'animated': False}, 'disabled': True}

ENTITY_SELECT = {'custom_id': 'e', 'placeholder': 'Who?', 'min_values': 1,
                 'max_values': 3, 'disabled': True}

POPULATED = {
    1: {'type': 1, 'id': 1, 'components': [LINK]},
    2: LINK,
    3: {'type': 3, 'id': 3, 'custom_id': 's', 'placeholder': 'Pick',
        'min_values': 0, 'max_values': 2, 'disabled': False,
        'options': [{'label': 'A', 'value': 'a', 'description': 'first',
                     'emoji': {'name': '\N{FIRE}'}, 'default': True}]},
    4: {'type': 4, 'id': 4, 'custom_id': 't', 'style': 2, 'label': 'Bio',
        'min_length': 1, 'max_length': 200, 'required': False,
        'value': 'hi', 'placeholder': 'About you'},
    5: dict(ENTITY_SELECT, type=5, id=5),
    6: dict(ENTITY_SELECT, type=6, id=6),
    7: dict(ENTITY_SELECT, type=7, id=7),
    8: dict(ENTITY_SELECT, type=8, id=8, channel_types=[0, 2]),
    9: {'type': 9, 'id': 9,
        'components': [{'type': 10, 'id': 22, 'content': 'beside'}],
        'accessory': {'type': 2, 'id': 23, 'style': 4, 'label': 'Delete',
                      'custom_id': 'del'}},
    10: {'type': 10, 'id': 10, 'content': '**bold**'},
    11: {'type': 11, 'id': 11, 'media': {'url': IMAGE},
         'description': 'alt', 'spoiler': True},
    12: {'type': 12, 'id': 12, 'items': [
        {'media': {'url': IMAGE}, 'description': 'alt', 'spoiler': False}]},
    13: {'type': 13, 'id': 13, 'file': {'url': 'attachment://a.txt'}, 'spoiler': True},
    14: {'type': 14, 'id': 14, 'divider': False, 'spacing': 2},
    17: {'type': 17, 'id': 17, 'accent_color': 0, 'spoiler': True,
         'components': [{'type': 10, 'id': 24, 'content': 'inside'},
                        {'type': 14, 'id': 25}]},
}


def _has_null(value) -> bool:
    if isinstance(value, dict):
        return any(v is None or _has_null(v) for v in value.values())
    if isinstance(value, list):
        return any(_has_null(v) for v in value)
    return False


def _variants():
    for name, table in (('minimal', MINIMAL), ('populated', POPULATED)):
        for ctype, payload in table.items():
            yield pytest.param(
                payload, id=f'{ComponentType(ctype).name.lower()}-{name}')


class TestEveryVariant:
    @pytest.mark.parametrize('table', [MINIMAL, POPULATED])
    def test_tables_cover_every_type(self, table) -> None:
        assert set(table) == set(TYPE_CLASSES)

    @pytest.mark.parametrize('payload', list(_variants()))
    def test_round_trip(self, payload) -> None:
        comp = MessageComponent.from_dict(payload, strict=True)
        assert type(comp) is TYPE_CLASSES[payload['type']]
        data = comp.to_dict()
        assert data == payload
        assert not _has_null(data)
        assert MessageComponent.from_dict(data, strict=True) == comp
