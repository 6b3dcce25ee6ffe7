from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import (
    Any, Iterable, Iterator, List, Mapping, Optional, Type, Union
)
import discord
from .logger import logger
from .simples import (
    ButtonStyle, ComponentType, InvalidArgument, LoadingState,
    MalformedPayload, SeparatorSpacing, TextInputStyle, UnknownComponentType,
    snowflake, try_enum
)

def _require(data: Mapping[str, Any], key: str, ctype: Any) -> Any:
    try:
        return data[key]
    except KeyError:
        name = getattr(ctype, 'name', ctype)
        raise MalformedPayload(
            f'{name} component is missing required field {key!r}',
            component_type=ctype if isinstance(ctype, int) else None,
            field=key) from None

def _put(result: dict, key: str, value: Any) -> None:
    """Set ``result[key]`` only if ``value`` is not :const:`None`,
    to keep payloads minimal."""
    if value is not None:
        result[key] = value

@dataclass
class UnfurledMedia:
    """An arbitrary URL or ``attachment://<filename>`` reference.

    Only :attr:`url` is sent to Discord. The other attributes are filled in
    by Discord and are :const:`None` on media you construct yourself.

    .. attribute:: url
        :type: str
    .. attribute:: proxy_url
        :type: Optional[str]
    .. attribute:: width
        :type: Optional[int]

        Width in pixels, if the media is an image or video.
    .. attribute:: height
        :type: Optional[int]
    .. attribute:: content_type
        :type: Optional[str]

        MIME type of the media.
    .. attribute:: loading_state
        :type: Optional[LoadingState]
    .. attribute:: attachment_id
        :type: Optional[int]

        ID of the uploaded attachment this media refers to, if any.
    """
    url: str
    proxy_url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    content_type: Optional[str] = None
    loading_state: Optional[LoadingState] = None
    attachment_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], ctype: Any = 'media') -> UnfurledMedia:
        return cls(
            url=_require(data, 'url', ctype),
            proxy_url=data.get('proxy_url'),
            width=data.get('width'),
            height=data.get('height'),
            content_type=data.get('content_type'),
            loading_state=try_enum(LoadingState, data.get('loading_state')),
            attachment_id=snowflake(data.get('attachment_id')),
        )

    @classmethod
    def coerce(cls, value: Union[str, UnfurledMedia, Any]) -> UnfurledMedia:
        """Accept a URL string, an :class:`UnfurledMedia`,
        or anything with a ``url`` (like :class:`discord.Attachment`)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value)
        if isinstance(value, discord.File):
            return cls(f'attachment://{value.filename}')
        url = getattr(value, 'url', None)
        if url is None:
            raise InvalidArgument(f'Cannot use {value!r} as media')
        return cls(url)

    @property
    def loaded(self) -> bool:
        return self.loading_state == LoadingState.LOADED

    def to_dict(self) -> dict:
        return {'url': self.url}

class MessageComponent:
    """A component on a message.

    Two components are equal if they serialize to the same payload.

    .. attribute:: type
        :type: ComponentType

        The component type. A constant on subclasses.
    .. attribute:: id
        :type: Optional[int]

        Identifier of the component within its message. Discord assigns
        one on send if it is left as :const:`None`.
    """
    type: ComponentType
    id: Optional[int] = None

    def to_dict(self) -> dict:
        """Render this component to a dictionary."""
        result = {'type': int(self.type)}
        _put(result, 'id', self.id)
        return result

    def __eq__(self, other: Any) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __repr__(self) -> str:
        return f'<{type(self).__name__} id={self.id!r}>'

    @staticmethod
    def from_dict(
        data: Mapping[str, Any], *, strict: bool = False
    ) -> Optional[MessageComponent]:
        """Construct the right component subclass from a payload.

        :param data: The component payload.
        :param bool strict:
            If :const:`True`, raise on unknown component types.
            Otherwise (the default) they are skipped and :const:`None`
            is returned, since Discord adds new component types over time.

        :raises MalformedPayload: if ``data`` is missing a required field
            or places a component where it is not allowed.
        :raises UnknownComponentType: in strict mode, if the type is unknown.
        """
        if 'type' not in data:
            raise MalformedPayload(
                'Component payload has no type', field='type')
        cls = TYPE_CLASSES.get(data['type'])
        if cls is None:
            if strict:
                raise UnknownComponentType(data['type'])
            logger.debug('Skipping unknown component type %r', data['type'])
            return None
        return cls._from_data(data, strict)

    @classmethod
    def _from_data(cls, data: Mapping[str, Any], strict: bool):
        raise NotImplementedError

def parse_components(
    payloads: Iterable[Mapping[str, Any]], *, strict: bool = False
) -> List[MessageComponent]:
    """Parse a list of component payloads, leaving out unknown ones
    (unless ``strict``, see :meth:`MessageComponent.from_dict`)."""
    result = []
    for data in payloads:
        comp = MessageComponent.from_dict(data, strict=strict)
        if comp is not None:
            result.append(comp)
    return result

class TextDisplay(MessageComponent):
    """Markdown text.

    .. attribute:: content
        :type: str
    """
    type = ComponentType.TEXT_DISPLAY

    def __init__(self, content: str, *, id: int = None) -> None:
        self.content = content
        self.id = id

    @property
    def text(self) -> str:
        """Alias for :attr:`content`."""
        return self.content

    @classmethod
    def _from_data(cls, data, strict):
        return cls(_require(data, 'content', cls.type), id=data.get('id'))

    def to_dict(self) -> dict:
        result = super().to_dict()
        result['content'] = self.content
        return result

class Separator(MessageComponent):
    """Vertical padding between components, optionally with a line.

    .. attribute:: divider
        :type: Optional[bool]

        Whether a visible line is drawn.
    .. attribute:: spacing
        :type: Optional[SeparatorSpacing]
    """
    type = ComponentType.SEPARATOR

    def __init__(
        self, *, divider: bool = None,
        spacing: SeparatorSpacing = None, id: int = None
    ) -> None:
        self.divider = divider
        self.spacing = try_enum(SeparatorSpacing, spacing)
        self.id = id

    @classmethod
    def _from_data(cls, data, strict):
        return cls(divider=data.get('divider'), spacing=data.get('spacing'),
                   id=data.get('id'))

    def to_dict(self) -> dict:
        result = super().to_dict()
        _put(result, 'divider', self.divider)
        if self.spacing is not None:
            result['spacing'] = int(self.spacing)
        return result

class Thumbnail(MessageComponent):
    """A small image, only usable as a :class:`Section` accessory.

    .. attribute:: media
        :type: UnfurledMedia
    .. attribute:: description
        :type: Optional[str]

        Alt text.
    .. attribute:: spoiler
        :type: Optional[bool]
    """
    type = ComponentType.THUMBNAIL

    def __init__(
        self, media: Union[str, UnfurledMedia], *, description: str = None,
        spoiler: bool = None, id: int = None
    ) -> None:
        self.media = UnfurledMedia.coerce(media)
        self.description = description
        self.spoiler = spoiler
        self.id = id

    @classmethod
    def _from_data(cls, data, strict):
        media = UnfurledMedia.from_dict(
            _require(data, 'media', cls.type), cls.type)
        return cls(media, description=data.get('description'),
                   spoiler=data.get('spoiler'), id=data.get('id'))

    def to_dict(self) -> dict:
        result = super().to_dict()
        result['media'] = self.media.to_dict()
        _put(result, 'description', self.description)
        _put(result, 'spoiler', self.spoiler)
        return result

class File(MessageComponent):
    """An uploaded file.

    .. attribute:: file
        :type: UnfurledMedia

        Must be an ``attachment://<filename>`` reference when sending.
    .. attribute:: spoiler
        :type: Optional[bool]
    .. attribute:: name
        :type: Optional[str]

        The file name, as reported by Discord.
    .. attribute:: size
        :type: Optional[int]

        The file size in bytes, as reported by Discord.
    """
    type = ComponentType.FILE
    name: Optional[str] = None
    size: Optional[int] = None

    def __init__(
        self, file: Union[str, UnfurledMedia, discord.File], *,
        spoiler: bool = None, id: int = None
    ) -> None:
        if isinstance(file, str) and '://' not in file:
            file = f'attachment://{file}'
        self.file = UnfurledMedia.coerce(file)
        self.spoiler = spoiler
        self.id = id

    @classmethod
    def _from_data(cls, data, strict):
        media = UnfurledMedia.from_dict(
            _require(data, 'file', cls.type), cls.type)
        self = cls(media, spoiler=data.get('spoiler'), id=data.get('id'))
        self.name = data.get('name')
        self.size = data.get('size')
        return self

    def to_dict(self) -> dict:
        result = super().to_dict()
        result['file'] = self.file.to_dict()
        _put(result, 'spoiler', self.spoiler)
        return result

class Button(MessageComponent):
    """A button that can be pressed.

    Constructing a button does not check it; :meth:`validate` does, and
    the :class:`View` builders call it for you.

    .. attribute:: style
        :type: ButtonStyle

        The style of button. There are four colors and one link style.
    .. attribute:: label
        :type: Optional[str]

        The text label of the button. Either this or ``emoji`` is required.
    .. attribute:: emoji
        :type: Optional[dict]

        The emoji label of the button, in wire form.
        See :attr:`partial_emoji` for a discord.py object.
    .. attribute:: custom_id
        :type: Optional[str]

        Arbitrary dev-defined ID. Forbidden for :attr:`ButtonStyle.LINK`,
        required otherwise.
    .. attribute:: url
        :type: Optional[str]

        URL to link to. Required for :attr:`ButtonStyle.LINK`,
        forbidden otherwise.
    .. attribute:: disabled
        :type: Optional[bool]

        Whether the button is disabled.
    """
    type = ComponentType.BUTTON

    def __init__(
        self, style: Union[ButtonStyle, int], *, label: str = None,
        emoji: dict = None, custom_id: str = None, url: str = None,
        disabled: bool = None, id: int = None
    ) -> None:
        self.style = try_enum(ButtonStyle, style)
        self.label = label
        self.emoji = emoji
        self.custom_id = custom_id
        self.url = url
        self.disabled = disabled
        self.id = id

    def validate(self) -> Button:
        """Check that the button can be sent.

        :raises InvalidArgument: if ``url`` and ``custom_id`` do not fit
            the style, or neither ``label`` nor ``emoji`` is set.
        """
        if self.style == ButtonStyle.LINK:
            if self.custom_id is not None:
                raise InvalidArgument('custom_id not allowed on LINK-style Buttons')
            if not self.url:
                raise InvalidArgument('LINK-style Buttons must have a url')
        else:
            if not self.custom_id:
                raise InvalidArgument('Non-LINK Buttons must have a custom_id')
            if self.url is not None:
                raise InvalidArgument('url not allowed on non-LINK Buttons')
        if self.label is None and self.emoji is None:
            raise InvalidArgument('Button must have at least one of label or emoji')
        return self

    @property
    def partial_emoji(self) -> Optional[discord.PartialEmoji]:
        if self.emoji is None:
            return None
        return discord.PartialEmoji.from_dict(self.emoji)

    @property
    def is_link(self) -> bool:
        return self.style == ButtonStyle.LINK

    @classmethod
    def _from_data(cls, data, strict):
        return cls(
            _require(data, 'style', cls.type), label=data.get('label'),
            emoji=data.get('emoji'), custom_id=data.get('custom_id'),
            url=data.get('url'), disabled=data.get('disabled'),
            id=data.get('id'))

    def to_dict(self) -> dict:
        result = super().to_dict()
        result['style'] = int(self.style)
        _put(result, 'label', self.label)
        _put(result, 'emoji', self.emoji)
        _put(result, 'custom_id', self.custom_id)
        _put(result, 'url', self.url)
        _put(result, 'disabled', self.disabled)
        return result

    def __repr__(self) -> str:
        return (f'<Button style={self.style!r} label={self.label!r} '
                f'custom_id={self.custom_id!r}>')

@dataclass
class SelectOption:
    """An option for a :class:`SelectMenu`.

    .. attribute:: label
        :type: str

        Option value displayed to user.
    .. attribute:: value
        :type: str

        Option value sent to bot.
    .. attribute:: description
        :type: Optional[str]

        Extended description of of the option.
    .. attribute:: emoji
        :type: Optional[dict]

        Emoji label for the option, in wire form.
    .. attribute:: default
        :type: Optional[bool]

        If :const:`True`, this option is selected by default.
    """
    label: str
    value: str
    description: Optional[str] = None
    emoji: Optional[dict] = None
    default: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SelectOption:
        return cls(
            label=_require(data, 'label', ComponentType.STRING_SELECT),
            value=_require(data, 'value', ComponentType.STRING_SELECT),
            description=data.get('description'),
            emoji=data.get('emoji'),
            default=data.get('default'))

    def to_dict(self) -> dict:
        result = {'label': self.label, 'value': self.value}
        _put(result, 'description', self.description)
        _put(result, 'emoji', self.emoji)
        _put(result, 'default', self.default)
        return result

class BaseSelect(MessageComponent):
    """Fields shared by every kind of select menu.

    .. attribute:: custom_id
        :type: str

        Arbitrary dev-defined ID.
    .. attribute:: placeholder
        :type: Optional[str]

        Placeholder text shown if nothing is selected.
    .. attribute:: min_values
        :type: Optional[int]

        Minimum number of values that can be selected.
        This can be 0 to facilitate choosing none.
    .. attribute:: max_values
        :type: Optional[int]

        Maximum number of values that can be selected.
    .. attribute:: disabled
        :type: Optional[bool]
    """

    def __init__(
        self, custom_id: str, *, placeholder: str = None,
        min_values: int = None, max_values: int = None,
        disabled: bool = None, id: int = None
    ) -> None:
        self.custom_id = custom_id
        self.placeholder = placeholder
        self.min_values = min_values
        self.max_values = max_values
        self.disabled = disabled
        self.id = id

    @classmethod
    def _kwargs(cls, data) -> dict:
        return {
            'placeholder': data.get('placeholder'),
            'min_values': data.get('min_values'),
            'max_values': data.get('max_values'),
            'disabled': data.get('disabled'),
            'id': data.get('id'),
        }

    @classmethod
    def _from_data(cls, data, strict):
        return cls(_require(data, 'custom_id', cls.type), **cls._kwargs(data))

    def to_dict(self) -> dict:
        result = super().to_dict()
        result['custom_id'] = self.custom_id
        _put(result, 'placeholder', self.placeholder)
        _put(result, 'min_values', self.min_values)
        _put(result, 'max_values', self.max_values)
        _put(result, 'disabled', self.disabled)
        return result

    def __repr__(self) -> str:
        return f'<{type(self).__name__} custom_id={self.custom_id!r}>'

class SelectMenu(BaseSelect):
    """A select menu for picking from developer-defined choices.

    .. attribute:: options
        :type: list[SelectOption]
    """
    type = ComponentType.STRING_SELECT

    def __init__(
        self, custom_id: str, options: Iterable[SelectOption] = (),
        **kwargs
    ) -> None:
        super().__init__(custom_id, **kwargs)
        self.options = list(options)

    @classmethod
    def _from_data(cls, data, strict):
        options = [SelectOption.from_dict(opt)
                   for opt in data.get('options', [])]
        return cls(_require(data, 'custom_id', cls.type), options,
                   **cls._kwargs(data))

    def to_dict(self) -> dict:
        result = super().to_dict()
        result['options'] = [opt.to_dict() for opt in self.options]
        return result

StringSelect = SelectMenu

class UserSelect(BaseSelect):
    """A select menu for picking users. Discord supplies the options."""
    type = ComponentType.USER_SELECT

class RoleSelect(BaseSelect):
    """A select menu for picking roles. Discord supplies the options."""
    type = ComponentType.ROLE_SELECT

class MentionableSelect(BaseSelect):
    """A select menu for picking users or roles."""
    type = ComponentType.MENTIONABLE_SELECT

class ChannelSelect(BaseSelect):
    """A select menu for picking channels.

    .. attribute:: channel_types
        :type: Optional[list[discord.ChannelType]]

        Restrict the choices to these kinds of channel.
    """
    type = ComponentType.CHANNEL_SELECT

    def __init__(
        self, custom_id: str, *,
        channel_types: Iterable[Union[int, discord.ChannelType]] = None,
        **kwargs
    ) -> None:
        super().__init__(custom_id, **kwargs)
        if channel_types is not None:
            channel_types = [
                t if isinstance(t, discord.ChannelType)
                else try_enum(discord.ChannelType, t)
                for t in channel_types]
        self.channel_types = channel_types

    @classmethod
    def _from_data(cls, data, strict):
        return cls(_require(data, 'custom_id', cls.type),
                   channel_types=data.get('channel_types'),
                   **cls._kwargs(data))

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.channel_types is not None:
            result['channel_types'] = [
                t.value if isinstance(t, discord.ChannelType) else t
                for t in self.channel_types]
        return result

class TextInput(MessageComponent):
    """A text field in a modal.

    .. attribute:: custom_id
        :type: str
    .. attribute:: style
        :type: TextInputStyle
    .. attribute:: label
        :type: Optional[str]
    .. attribute:: min_length
        :type: Optional[int]
    .. attribute:: max_length
        :type: Optional[int]
    .. attribute:: required
        :type: Optional[bool]
    .. attribute:: value
        :type: Optional[str]

        Pre-filled text, or what the user typed when received from Discord.
    .. attribute:: placeholder
        :type: Optional[str]
    """
    type = ComponentType.TEXT_INPUT

    def __init__(
        self, custom_id: str, style: Union[TextInputStyle, int] = None, *,
        label: str = None, min_length: int = None, max_length: int = None,
        required: bool = None, value: str = None, placeholder: str = None,
        id: int = None
    ) -> None:
        self.custom_id = custom_id
        self.style = try_enum(TextInputStyle, style)
        self.label = label
        self.min_length = min_length
        self.max_length = max_length
        self.required = required
        self.value = value
        self.placeholder = placeholder
        self.id = id

    @property
    def is_short(self) -> bool:
        return self.style == TextInputStyle.SHORT

    @property
    def is_paragraph(self) -> bool:
        return self.style == TextInputStyle.PARAGRAPH

    @classmethod
    def _from_data(cls, data, strict):
        return cls(
            _require(data, 'custom_id', cls.type), data.get('style'),
            label=data.get('label'), min_length=data.get('min_length'),
            max_length=data.get('max_length'), required=data.get('required'),
            value=data.get('value'), placeholder=data.get('placeholder'),
            id=data.get('id'))

    def to_dict(self) -> dict:
        result = super().to_dict()
        result['custom_id'] = self.custom_id
        if self.style is not None:
            result['style'] = int(self.style)
        for key in ('label', 'min_length', 'max_length',
                    'required', 'value', 'placeholder'):
            _put(result, key, getattr(self, key))
        return result

INTERACTIVE = (Button, BaseSelect, TextInput)

class ActionRow(MessageComponent):
    """A container for interactive components.

    This can be instantiated either like
    ``ActionRow(component1, component2)``
    or like ``ActionRow([component1, component2])``.

    .. attribute:: components
        :type: list[Union[Button, BaseSelect, TextInput]]

        Up to 5 buttons, or 1 select menu or text input.
    """
    type = ComponentType.ACTION_ROW

    components: List[NonActionRow]

    def __init__(
        self,
        first: Union[NonActionRow, Iterable[NonActionRow]] = (),
        *args: NonActionRow, id: int = None
    ) -> None:
        if isinstance(first, MessageComponent):
            self.components = [first] + list(args)
        else:
            # if it's not a component, assume it's an iterable of ones
            self.components = list(first) + list(args)
        self.id = id

    def __iter__(self) -> Iterator[NonActionRow]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    @property
    def buttons(self) -> List[Button]:
        """All buttons in this row."""
        return [c for c in self.components if isinstance(c, Button)]

    @property
    def select_menus(self) -> List[BaseSelect]:
        """All select menus (of any kind) in this row."""
        return [c for c in self.components if isinstance(c, BaseSelect)]

    @property
    def text_inputs(self) -> List[TextInput]:
        """All text inputs in this row."""
        return [c for c in self.components if isinstance(c, TextInput)]

    @classmethod
    def _from_data(cls, data, strict):
        children = parse_components(
            _require(data, 'components', cls.type), strict=strict)
        for child in children:
            if not isinstance(child, INTERACTIVE):
                raise MalformedPayload(
                    f'{child.type.name} component cannot be in an action row',
                    component_type=int(cls.type), field='components')
        return cls(children, id=data.get('id'))

    def to_dict(self) -> dict:
        result = super().to_dict()
        result['components'] = [comp.to_dict() for comp in self.components]
        return result

class Section(MessageComponent):
    """Text displays with a :class:`Button` or :class:`Thumbnail`
    accessory next to them.

    .. attribute:: components
        :type: list[TextDisplay]
    .. attribute:: accessory
        :type: Union[Button, Thumbnail]
    """
    type = ComponentType.SECTION

    def __init__(
        self, components: Iterable[TextDisplay],
        accessory: Union[Button, Thumbnail], *, id: int = None
    ) -> None:
        self.components = list(components)
        self.accessory = accessory
        self.id = id

    @property
    def is_button(self) -> bool:
        """Whether the accessory is a button."""
        return isinstance(self.accessory, Button)

    @property
    def is_thumbnail(self) -> bool:
        """Whether the accessory is a thumbnail."""
        return isinstance(self.accessory, Thumbnail)

    @classmethod
    def _from_data(cls, data, strict):
        # an unknown accessory is as malformed as a misplaced one
        accessory = MessageComponent.from_dict(
            _require(data, 'accessory', cls.type), strict=False)
        if not isinstance(accessory, (Button, Thumbnail)):
            raise MalformedPayload(
                'Section accessory must be a button or thumbnail, not '
                f'type {data["accessory"].get("type")!r}',
                component_type=int(cls.type), field='accessory')
        children = parse_components(
            _require(data, 'components', cls.type), strict=strict)
        for child in children:
            if not isinstance(child, TextDisplay):
                raise MalformedPayload(
                    f'{child.type.name} component cannot be in a section',
                    component_type=int(cls.type), field='components')
        return cls(children, accessory, id=data.get('id'))

    def to_dict(self) -> dict:
        result = super().to_dict()
        result['components'] = [comp.to_dict() for comp in self.components]
        result['accessory'] = self.accessory.to_dict()
        return result

@dataclass
class MediaGalleryItem:
    """One image or video in a :class:`MediaGallery`.

    .. attribute:: media
        :type: UnfurledMedia
    .. attribute:: description
        :type: Optional[str]

        Alt text.
    .. attribute:: spoiler
        :type: Optional[bool]
    """
    media: UnfurledMedia
    description: Optional[str] = None
    spoiler: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MediaGalleryItem:
        ctype = ComponentType.MEDIA_GALLERY
        return cls(
            media=UnfurledMedia.from_dict(_require(data, 'media', ctype), ctype),
            description=data.get('description'),
            spoiler=data.get('spoiler'))

    def to_dict(self) -> dict:
        result = {'media': self.media.to_dict()}
        _put(result, 'description', self.description)
        _put(result, 'spoiler', self.spoiler)
        return result

class MediaGallery(MessageComponent):
    """A grid of images and videos.

    .. attribute:: items
        :type: list[MediaGalleryItem]
    """
    type = ComponentType.MEDIA_GALLERY

    def __init__(
        self, items: Iterable[MediaGalleryItem] = (), *, id: int = None
    ) -> None:
        self.items = list(items)
        self.id = id

    @classmethod
    def _from_data(cls, data, strict):
        items = [MediaGalleryItem.from_dict(item)
                 for item in _require(data, 'items', cls.type)]
        return cls(items, id=data.get('id'))

    def to_dict(self) -> dict:
        result = super().to_dict()
        result['items'] = [item.to_dict() for item in self.items]
        return result

class Container(MessageComponent):
    """A box around other components, with an optional accent colour
    bar like an embed's.

    .. attribute:: components
        :type: list[MessageComponent]
    .. attribute:: accent_color
        :type: Optional[int]

        Packed 24-bit RGB. See :attr:`colour` for a :class:`discord.Colour`.
    .. attribute:: spoiler
        :type: Optional[bool]
    """
    type = ComponentType.CONTAINER

    def __init__(
        self, components: Iterable[MessageComponent] = (), *,
        accent_color: int = None, spoiler: bool = None, id: int = None
    ) -> None:
        self.components = list(components)
        self.accent_color = accent_color
        self.spoiler = spoiler
        self.id = id

    @property
    def colour(self) -> Optional[discord.Colour]:
        if self.accent_color is None:
            return None
        return discord.Colour(self.accent_color)

    color = colour

    @classmethod
    def _from_data(cls, data, strict):
        children = parse_components(
            _require(data, 'components', cls.type), strict=strict)
        return cls(children, accent_color=data.get('accent_color'),
                   spoiler=data.get('spoiler'), id=data.get('id'))

    def to_dict(self) -> dict:
        result = super().to_dict()
        _put(result, 'accent_color', self.accent_color)
        _put(result, 'spoiler', self.spoiler)
        result['components'] = [comp.to_dict() for comp in self.components]
        return result

NonActionRow = Union[Button, BaseSelect, TextInput]

TYPE_CLASSES: Mapping[int, Type[MessageComponent]] = MappingProxyType({
    ComponentType.ACTION_ROW: ActionRow,
    ComponentType.BUTTON: Button,
    ComponentType.STRING_SELECT: SelectMenu,
    ComponentType.TEXT_INPUT: TextInput,
    ComponentType.USER_SELECT: UserSelect,
    ComponentType.ROLE_SELECT: RoleSelect,
    ComponentType.MENTIONABLE_SELECT: MentionableSelect,
    ComponentType.CHANNEL_SELECT: ChannelSelect,
    ComponentType.SECTION: Section,
    ComponentType.TEXT_DISPLAY: TextDisplay,
    ComponentType.THUMBNAIL: Thumbnail,
    ComponentType.MEDIA_GALLERY: MediaGallery,
    ComponentType.FILE: File,
    ComponentType.SEPARATOR: Separator,
    ComponentType.CONTAINER: Container,
})
