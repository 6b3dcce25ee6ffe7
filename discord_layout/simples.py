from __future__ import annotations
import re
from enum import IntEnum, IntFlag
from typing import Any, Optional
import discord

class LayoutWarning(UserWarning):
    """:mod:`discord_layout`-specific warning type."""

class MalformedPayload(discord.InvalidData):
    """A payload from Discord is missing a field its type requires,
    or places a component where the protocol does not allow it.

    .. attribute:: component_type
        :type: Optional[int]

        The ``type`` tag of the offending payload, if known.
    .. attribute:: field
        :type: Optional[str]

        The name of the missing or misplaced field, if known.
    """

    def __init__(
        self, message: str, *,
        component_type: Optional[int] = None, field: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.component_type = component_type
        self.field = field

class UnknownComponentType(discord.InvalidData):
    """A component payload has a ``type`` this library does not know.
    Only raised when parsing with ``strict=True``.

    .. attribute:: value

        The unrecognized ``type`` value.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(f'Unknown component type: {value!r}')
        self.value = value

class InvalidArgument(discord.ClientException, ValueError):
    """A builder or mutator was called with arguments that can never be
    valid. Raised before any request is made."""

class ComponentType(IntEnum):
    """Possible ``type`` tags of message components.

    Values 15 and 16 are reserved by Discord and intentionally absent.
    """
    ACTION_ROW = 1
    BUTTON = 2
    STRING_SELECT = 3
    TEXT_INPUT = 4
    USER_SELECT = 5
    ROLE_SELECT = 6
    MENTIONABLE_SELECT = 7
    CHANNEL_SELECT = 8
    SECTION = 9
    TEXT_DISPLAY = 10
    THUMBNAIL = 11
    MEDIA_GALLERY = 12
    FILE = 13
    SEPARATOR = 14
    CONTAINER = 17

class ButtonStyle(IntEnum):
    """Possible styles of :class:`Button`.

    .. attribute:: PRIMARY

        Blurple.
    .. attribute:: SECONDARY

        Grey.
    .. attribute:: SUCCESS

        Green.
    .. attribute:: DANGER

        Red.
    .. attribute:: LINK

        Grey, navigates to a URL instead of sending an interaction.
    """
    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4
    LINK = 5

class SeparatorSpacing(IntEnum):
    """Amount of padding a :class:`Separator` adds."""
    SMALL = 1
    LARGE = 2

class TextInputStyle(IntEnum):
    """Single line (:attr:`SHORT`) or multi line (:attr:`PARAGRAPH`)."""
    SHORT = 1
    PARAGRAPH = 2

class LoadingState(IntEnum):
    """Loading state of an :class:`UnfurledMedia`."""
    UNKNOWN = 0
    LOADING = 1
    LOADED = 2
    NOT_FOUND = 3

class MessageFlags(IntFlag):
    """Message flags relevant to component layouts.

    .. attribute:: EPHEMERAL

        Only the user receiving the message can see it.
    .. attribute:: IS_COMPONENTS_V2

        The message uses layout components. Content and embeds are
        disabled for such messages.
    """
    EPHEMERAL = 1 << 6
    IS_COMPONENTS_V2 = 1 << 15

class AutoModTriggerType(IntEnum):
    KEYWORD = 1
    SPAM = 3
    KEYWORD_PRESET = 4
    MENTION_SPAM = 5
    MEMBER_PROFILE = 6

class AutoModActionType(IntEnum):
    """What happens when an auto moderation rule triggers.
    A rule can hold at most one action of each type.
    """
    BLOCK_MESSAGE = 1
    SEND_ALERT_MESSAGE = 2
    TIMEOUT = 3
    BLOCK_MEMBER_INTERACTION = 4

class AutoModPresetType(IntEnum):
    PROFANITY = 1
    SEXUAL_CONTENT = 2
    SLURS = 3

class AutoModEventType(IntEnum):
    MESSAGE_SEND = 1
    MEMBER_UPDATE = 2

class EntitlementType(IntEnum):
    PURCHASE = 1
    PREMIUM_SUBSCRIPTION = 2
    DEVELOPER_GIFT = 3
    TEST_MODE_PURCHASE = 4
    FREE_PURCHASE = 5
    USER_GIFT = 6
    PREMIUM_PURCHASE = 7
    APPLICATION_SUBSCRIPTION = 8

class EntitlementOwnerType(IntEnum):
    GUILD = 1
    USER = 2

class SubscriptionStatus(IntEnum):
    ACTIVE = 0
    ENDING = 1
    INACTIVE = 2

class StickerType(IntEnum):
    STANDARD = 1
    GUILD = 2

class StickerFormatType(IntEnum):
    PNG = 1
    APNG = 2
    LOTTIE = 3
    GIF = 4

class ApplicationFlags(IntFlag):
    """Public flags of an :class:`Application`."""
    AUTO_MODERATION_RULE_CREATE_BADGE = 1 << 6
    GATEWAY_PRESENCE = 1 << 12
    GATEWAY_PRESENCE_LIMITED = 1 << 13
    GATEWAY_GUILD_MEMBERS = 1 << 14
    GATEWAY_GUILD_MEMBERS_LIMITED = 1 << 15
    VERIFICATION_PENDING_GUILD_LIMIT = 1 << 16
    EMBEDDED = 1 << 17
    GATEWAY_MESSAGE_CONTENT = 1 << 18
    GATEWAY_MESSAGE_CONTENT_LIMITED = 1 << 19
    APPLICATION_COMMAND_BADGE = 1 << 23

class PollLayoutType(IntEnum):
    DEFAULT = 1

def try_enum(enum_type: type, value: Any) -> Any:
    """Convert ``value`` into a member of ``enum_type``,
    or leave it as-is if Discord sent something newer than this library."""
    if value is None:
        return None
    try:
        return enum_type(value)
    except ValueError:
        return value # just use the new int

def enum_value(enum_type: type, value: Any) -> Any:
    """Look up an enum member by name (case-insensitive) or value,
    returning the raw integer. Used by builders that accept ``'small'``
    as well as ``SeparatorSpacing.SMALL`` or ``1``."""
    if value is None:
        return None
    if isinstance(value, str):
        try:
            return int(enum_type[value.upper()])
        except KeyError:
            raise InvalidArgument(
                f'{value!r} is not a valid {enum_type.__name__}') from None
    return int(value)

HEX_COLOUR = re.compile(r'#?[0-9a-fA-F]{6}')

def normalize_color(value: Any) -> Optional[int]:
    """Normalize a colour into a packed 24-bit RGB integer.

    :param value: An integer in ``0..0xFFFFFF``, a ``#RRGGBB`` or ``RRGGBB``
        hex string, an ``(R, G, B)`` sequence of bytes, a
        :class:`discord.Colour`, or :const:`None` for no colour.

    :raises InvalidArgument: if the value does not fit in 24 bits,
        is not exactly six hex digits, or is a sequence that is not
        three integers in ``0..255``.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidArgument('Colour cannot be a bool')
    if isinstance(value, discord.Colour):
        value = value.value
    if isinstance(value, str):
        if HEX_COLOUR.fullmatch(value) is None:
            raise InvalidArgument(f'{value!r} is not a #RRGGBB hex colour')
        value = int(value.lstrip('#'), 16)
    elif isinstance(value, (tuple, list)):
        if len(value) != 3:
            raise InvalidArgument('Colour tuple must have three values')
        if not all(isinstance(c, int) and not isinstance(c, bool)
                   and 0 <= c <= 0xFF for c in value):
            raise InvalidArgument('Colour tuple values must be bytes')
        r, g, b = value
        value = (r << 16) | (g << 8) | b
    elif not isinstance(value, int):
        raise InvalidArgument(f'Cannot use {value!r} as a colour')
    if not 0 <= value <= 0xFFFFFF:
        raise InvalidArgument('Colour must be 24-bit')
    return value

def normalize_emoji(value: Any) -> Optional[dict]:
    """Normalize an emoji into the ``{id}`` / ``{name}`` wire form.

    * a positive integer or numeric string is a custom emoji ID
      and becomes ``{'id': int(value)}``
    * any other string is a unicode emoji and becomes ``{'name': value}``
    * an object with a non-null ``id`` (e.g. :class:`discord.Emoji` or
      :class:`discord.PartialEmoji`) becomes ``{'id': value.id}``, one
      with a null ``id`` falls back to ``{'name': value.name}``
    * a mapping is taken as already in wire form
    * :const:`None` means no emoji and stays :const:`None`
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidArgument('Emoji cannot be a bool')
    if isinstance(value, int):
        if value <= 0:
            raise InvalidArgument('Emoji IDs must be positive')
        return {'id': value}
    if isinstance(value, str):
        if value.isdigit() and int(value) > 0:
            return {'id': int(value)}
        return {'name': value}
    if isinstance(value, dict):
        return {k: v for k, v in value.items() if v is not None}
    emoji_id = getattr(value, 'id', None)
    if emoji_id is not None:
        return {'id': int(emoji_id)}
    name = getattr(value, 'name', None)
    if name:
        return {'name': name}
    raise InvalidArgument(f'Cannot use {value!r} as an emoji')

class _Route(discord.http.Route):
    BASE = 'https://discord.com/api/v10'

def snowflake(value: Any) -> Optional[int]:
    """``int(value)`` for IDs that may be absent."""
    if value is None:
        return None
    return int(value)
