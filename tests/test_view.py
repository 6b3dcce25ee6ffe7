import discord
import pytest

from discord_layout.simples import InvalidArgument, LayoutWarning, MessageFlags
from discord_layout.components import (
    ActionRow, Button, Container, MessageComponent, Section, TextDisplay,
    Thumbnail
)
from discord_layout.view import Modal, View, make_button


class TestButtons:
    def test_link_with_custom_id(self) -> None:
        with pytest.raises(InvalidArgument):
            make_button('link', label='x', url='https://e.com', custom_id='y')

    def test_link_without_url(self) -> None:
        with pytest.raises(InvalidArgument):
            make_button('link', label='x')

    def test_non_link_without_custom_id(self) -> None:
        with pytest.raises(InvalidArgument):
            make_button('primary', label='x')

    def test_non_link_with_url(self) -> None:
        with pytest.raises(InvalidArgument):
            make_button('success', label='x', custom_id='y', url='https://e.com')

    def test_needs_label_or_emoji(self) -> None:
        with pytest.raises(InvalidArgument):
            make_button('secondary', custom_id='y')
        button = make_button('secondary', custom_id='y', emoji=123)
        assert button.to_dict()['emoji'] == {'id': 123}

    def test_bad_style_name(self) -> None:
        with pytest.raises(InvalidArgument):
            make_button('blurple', label='x', custom_id='y')


class TestView:
    def test_builds_nested_layout(self) -> None:
        def layout(view):
            box = view.container(colour=(255, 0, 255), spoiler=True)
            box.text_display('hello')
            box.section(components=['side text']).thumbnail(
                'https://e.com/a.png', description='alt')
            box.separator(spacing='small')
            row = box.row()
            row.button('primary', label='A', custom_id='a')
            row.button('link', label='B', url='https://e.com')

        payload = View(layout).to_payload()
        assert payload['flags'] == MessageFlags.IS_COMPONENTS_V2
        container = payload['components'][0]
        assert container['accent_color'] == 0xFF00FF
        assert container['spoiler'] is True
        assert [c['type'] for c in container['components']] == [10, 9, 14, 1]
        assert container['components'][2] == {'type': 14, 'divider': True, 'spacing': 1}

    def test_parse_of_built_view_matches(self) -> None:
        view = View()
        box = view.container(color='#00FF00')
        box.text_display('hi')
        box.media_gallery().item('https://e.com/a.png', spoiler=True)
        box.file('notes.txt')
        parsed = MessageComponent.from_dict(view.to_dict()[0])
        assert parsed == view.components[0]
        assert isinstance(parsed, Container)
        assert parsed.components[2].file.url == 'attachment://notes.txt'

    def test_unset_colour_is_absent(self) -> None:
        view = View()
        view.container().text_display('x')
        assert 'accent_color' not in view.to_dict()[0]

    def test_invalid_colour_rejected_at_call(self) -> None:
        with pytest.raises(InvalidArgument):
            View().container(colour=0x1000000)
        with pytest.raises(InvalidArgument):
            View().container(colour=[1, 2])

    def test_section_needs_accessory(self) -> None:
        view = View()
        view.section(components=['no accessory'])
        with pytest.raises(InvalidArgument):
            view.to_dict()

    def test_section_button_accessory(self) -> None:
        view = View()
        view.section(lambda s: s.button('danger', label='x', custom_id='y'),
                     components=['text'])
        section = view.components[0]
        assert isinstance(section, Section) and section.is_button

    def test_legacy_rows_have_no_flag(self) -> None:
        view = View()
        view.row().string_select('pick', configure=lambda m: m.option('A', 'a'))
        payload = view.to_payload()
        assert 'flags' not in payload
        assert payload['components'][0]['components'][0]['options'] == [
            {'label': 'A', 'value': 'a'}]

    def test_entity_selects(self) -> None:
        view = View()
        row = view.row()
        row.channel_select('c', channel_types=[discord.ChannelType.text])
        select = view.to_dict()[0]['components'][0]
        assert select == {'type': 8, 'custom_id': 'c', 'channel_types': [0]}

    def test_user_role_mentionable_selects(self) -> None:
        view = View()
        view.row().user_select('u', max_values=2)
        view.row().role_select('r', placeholder='Role')
        view.row().mentionable_select('m', disabled=True)
        assert [row['components'] for row in view.to_dict()] == [
            [{'type': 5, 'custom_id': 'u', 'max_values': 2}],
            [{'type': 6, 'custom_id': 'r', 'placeholder': 'Role'}],
            [{'type': 7, 'custom_id': 'm', 'disabled': True}],
        ]
        assert 'flags' not in view.to_payload()

    def test_frozen_after_serialize(self) -> None:
        view = View()
        view.text_display('x')
        view.to_dict()
        with pytest.raises(InvalidArgument):
            view.text_display('y')
        assert len(view) == 1

    def test_nested_builders_frozen_after_serialize(self) -> None:
        view = View()
        box = view.container()
        box.text_display('x')
        row = box.row()
        row.button('primary', label='A', custom_id='a')
        menu = view.row().string_select('pick')
        menu.option('A', 'a')
        section = view.section(components=['s'])
        section.thumbnail('https://e.com/a.png')
        gallery = view.media_gallery()
        gallery.item('https://e.com/b.png')
        first = view.to_dict()
        with pytest.raises(InvalidArgument):
            box.text_display('late')
        with pytest.raises(InvalidArgument):
            box.colour = 0xFF0000
        with pytest.raises(InvalidArgument):
            row.button('secondary', label='B', custom_id='b')
        with pytest.raises(InvalidArgument):
            row.user_select('u')
        with pytest.raises(InvalidArgument):
            menu.option('B', 'b')
        with pytest.raises(InvalidArgument):
            section.text_display('late')
        with pytest.raises(InvalidArgument):
            gallery.item('https://e.com/c.png')
        assert view.to_dict() == first

    def test_returned_components_detached_after_serialize(self) -> None:
        view = View()
        button = view.row().button('primary', label='A', custom_id='a')
        first = view.to_dict()
        button.label = 'changed'
        button.url = 'https://e.com'
        assert view.to_dict() == first
        view.to_dict()[0]['components'][0]['label'] = 'edited'
        view.components[0].components[0].label = 'edited'
        assert view.to_dict() == first

    def test_mutated_button_rejected_at_serialize(self) -> None:
        view = View()
        button = view.row().button('primary', label='A', custom_id='a')
        button.url = 'https://e.com'
        with pytest.raises(InvalidArgument):
            view.to_dict()

    def test_overfull_row_warns(self) -> None:
        view = View()
        row = view.row()
        for i in range(6):
            row.button('secondary', label=str(i), custom_id=str(i))
        with pytest.warns(LayoutWarning):
            view.to_dict()

    def test_add_checks_placement(self) -> None:
        view = View()
        with pytest.raises(InvalidArgument):
            view.add(Thumbnail('https://e.com/a.png'))
        with pytest.raises(InvalidArgument):
            view.add(ActionRow(Button(5, label='x')))
        view.add(TextDisplay('ok'))
        box = view.container()
        with pytest.raises(InvalidArgument):
            box.add(Container())


def test_modal() -> None:
    modal = Modal('form', 'Tell us', lambda m: (
        m.text_input('name', 'Name', max_length=32),
        m.text_input('bio', 'Bio', 'paragraph', required=False),
    ))
    data = modal.to_dict()
    assert data['custom_id'] == 'form' and data['title'] == 'Tell us'
    assert [row['components'][0]['style'] for row in data['components']] == [1, 2]
    assert data['components'][1]['components'][0]['required'] is False
