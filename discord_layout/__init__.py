'''
Build and parse Discord's layout components, and edit the REST resources
around them, with discord.py.

Example Usage
~~~~~~~~~~~~~

.. code-block:: python

    import discord
    import discord_layout as layout

    def build(view: layout.View):
        # containers group components under an accent colour bar
        box = view.container(colour='#5865F2')
        box.text_display('## Release notes')
        # a section is text with a button or thumbnail beside it
        section = box.section(components=['Version 1.0 is out.'])
        section.thumbnail('https://example.com/logo.png')
        box.separator(spacing='large')
        # buttons and select menus live in action rows
        row = box.row()
        row.button('link', label='Changelog', url='https://example.com')
        row.button('primary', label='Subscribe', custom_id='sub', emoji='\\N{BELL}')

    view = layout.View(build)
    # {'components': [...], 'flags': 32768}
    payload = view.to_payload()

    # parsing goes the other way; unknown component types are skipped
    components = layout.parse_components(message_data['components'])

    # resources are edited with partial updates
    rule = layout.AutoModerationRule(data=rule_data, client=client)
    await rule.set_timeout(datetime.timedelta(minutes=5))
    await rule.set_keyword_filter(['spam', 'scam'])

Notes
~~~~~

* A message whose top-level components are not all action rows needs the
  :attr:`~discord_layout.MessageFlags.IS_COMPONENTS_V2` flag;
  :meth:`~discord_layout.View.to_payload` sets it for you.
* Builders check what they can before anything is sent: invalid colours,
  buttons with the wrong combination of ``url`` and ``custom_id``, and
  sections without an accessory raise
  :class:`~discord_layout.InvalidArgument`.
* Each resource edit sends only the changed fields, then refreshes every
  attribute from Discord's response. A failed edit changes nothing.
'''
from __future__ import annotations
from .simples import (
    LayoutWarning, MalformedPayload, UnknownComponentType, InvalidArgument,
    ComponentType, ButtonStyle, SeparatorSpacing, TextInputStyle,
    LoadingState, MessageFlags, AutoModTriggerType, AutoModActionType,
    AutoModPresetType, AutoModEventType, EntitlementType,
    EntitlementOwnerType, SubscriptionStatus, StickerType, StickerFormatType,
    ApplicationFlags, PollLayoutType, normalize_color, normalize_emoji
)
from .components import (
    UnfurledMedia, MessageComponent, parse_components, TextDisplay,
    Separator, Thumbnail, File, Button, SelectOption, BaseSelect, SelectMenu,
    StringSelect, UserSelect, RoleSelect, MentionableSelect, ChannelSelect,
    TextInput, ActionRow, Section, MediaGalleryItem, MediaGallery, Container
)
from .view import (
    make_button, SelectMenuBuilder, RowBuilder, SectionBuilder,
    MediaGalleryBuilder, ContainerBuilder, View, Modal
)
from .resource import Resource
from .automod import (
    AutoModerationAction, AutoModerationRule, AutoModerationRuleBuilder,
    create_rule, fetch_rules
)
from .sound import SoundboardSound
from .sticker import Sticker, fetch_sticker, fetch_guild_stickers
from .application import Application, Team, TeamMember, fetch_application
from .monetization import (
    Entitlement, Subscription, fetch_entitlements, create_test_entitlement,
    fetch_subscriptions, fetch_subscription
)
from .poll import Poll, PollAnswer, PollAnswerCount, PollBuilder

__all__ = [
    'LayoutWarning',
    'MalformedPayload',
    'UnknownComponentType',
    'InvalidArgument',
    'ComponentType',
    'ButtonStyle',
    'SeparatorSpacing',
    'TextInputStyle',
    'LoadingState',
    'MessageFlags',
    'AutoModTriggerType',
    'AutoModActionType',
    'AutoModPresetType',
    'AutoModEventType',
    'EntitlementType',
    'EntitlementOwnerType',
    'SubscriptionStatus',
    'StickerType',
    'StickerFormatType',
    'ApplicationFlags',
    'PollLayoutType',
    'normalize_color',
    'normalize_emoji',
    'UnfurledMedia',
    'MessageComponent',
    'parse_components',
    'TextDisplay',
    'Separator',
    'Thumbnail',
    'File',
    'Button',
    'SelectOption',
    'BaseSelect',
    'SelectMenu',
    'StringSelect',
    'UserSelect',
    'RoleSelect',
    'MentionableSelect',
    'ChannelSelect',
    'TextInput',
    'ActionRow',
    'Section',
    'MediaGalleryItem',
    'MediaGallery',
    'Container',
    'make_button',
    'SelectMenuBuilder',
    'RowBuilder',
    'SectionBuilder',
    'MediaGalleryBuilder',
    'ContainerBuilder',
    'View',
    'Modal',
    'Resource',
    'AutoModerationAction',
    'AutoModerationRule',
    'AutoModerationRuleBuilder',
    'create_rule',
    'fetch_rules',
    'SoundboardSound',
    'Sticker',
    'fetch_sticker',
    'fetch_guild_stickers',
    'Application',
    'Team',
    'TeamMember',
    'fetch_application',
    'Entitlement',
    'Subscription',
    'fetch_entitlements',
    'create_test_entitlement',
    'fetch_subscriptions',
    'fetch_subscription',
    'Poll',
    'PollAnswer',
    'PollAnswerCount',
    'PollBuilder',
]

__version__ = '1.0.0'
