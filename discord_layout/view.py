from __future__ import annotations
import copy
from warnings import warn
from typing import (
    Any, Callable, Iterable, List, Optional, Tuple, Type, TypeVar, Union
)
import discord
from .simples import (
    ButtonStyle, InvalidArgument, LayoutWarning, MessageFlags, SeparatorSpacing,
    TextInputStyle, enum_value, normalize_color, normalize_emoji
)
from .components import (
    ActionRow, BaseSelect, Button, ChannelSelect, Container, File,
    MediaGallery, MediaGalleryItem, MentionableSelect, MessageComponent,
    RoleSelect, Section, SelectMenu, SelectOption, Separator, TextDisplay,
    TextInput, Thumbnail, UnfurledMedia, UserSelect
)

B = TypeVar('B')
Configure = Optional[Callable[[Any], Any]]

MediaLike = Union[str, UnfurledMedia, discord.File]

# components that can sit directly in a container (or at the top level)
LAYOUT_TYPES: Tuple[Type[MessageComponent], ...] = (
    ActionRow, Section, TextDisplay, MediaGallery, File, Separator)
TOP_LEVEL_TYPES = LAYOUT_TYPES + (Container,)

def make_button(
    style: Union[ButtonStyle, int, str], *, label: str = None,
    emoji: Any = None, custom_id: str = None, url: str = None,
    disabled: bool = None, id: int = None
) -> Button:
    """Create and validate a :class:`Button`.

    :param style: A :class:`ButtonStyle`, its value, or its name
        (e.g. ``'primary'``).
    :param emoji: Anything :func:`normalize_emoji` accepts.

    :raises InvalidArgument: see :meth:`Button.validate`.
    """
    return Button(
        enum_value(ButtonStyle, style), label=label,
        emoji=normalize_emoji(emoji), custom_id=custom_id, url=url,
        disabled=disabled, id=id).validate()

def _build(item: Any) -> MessageComponent:
    build = getattr(item, 'build', None)
    if build is not None:
        return build()
    return item

class _Builder:
    """Refuses changes once the view it belongs to is serialized."""

    _frozen = False

    def _check_open(self) -> None:
        if self._frozen:
            raise InvalidArgument('View has already been serialized')

    def _freeze(self) -> None:
        self._frozen = True

def _validate_tree(component: MessageComponent) -> None:
    if isinstance(component, Button):
        component.validate()
    elif isinstance(component, Section):
        _validate_tree(component.accessory)
    for child in getattr(component, 'components', ()):
        _validate_tree(child)

class SelectMenuBuilder(_Builder):
    """Builds a :class:`SelectMenu` with developer-defined options.
    Returned by :meth:`RowBuilder.string_select`."""

    def __init__(
        self, custom_id: str, options: Iterable[SelectOption] = (), *,
        placeholder: str = None, min_values: int = None,
        max_values: int = None, disabled: bool = None, id: int = None
    ) -> None:
        self.custom_id = custom_id
        self.options = list(options)
        self.placeholder = placeholder
        self.min_values = min_values
        self.max_values = max_values
        self.disabled = disabled
        self.id = id

    def option(
        self, label: str, value: str, *, description: str = None,
        emoji: Any = None, default: bool = None
    ) -> SelectOption:
        """Add an option to this select menu.

        :param str label: The title of this option.
        :param str value: The value that this option represents.
        :param description: An optional description of the option.
        :param emoji: Anything :func:`normalize_emoji` accepts.
        :param default: Whether this is the default selected option.
        """
        self._check_open()
        option = SelectOption(label, value, description,
                              normalize_emoji(emoji), default)
        self.options.append(option)
        return option

    def build(self) -> SelectMenu:
        return SelectMenu(
            self.custom_id, self.options, placeholder=self.placeholder,
            min_values=self.min_values, max_values=self.max_values,
            disabled=self.disabled, id=self.id)

class RowBuilder(_Builder):
    """Builds an :class:`ActionRow`.

    Buttons and select menus must be within an action row. A row holds
    up to five buttons, or a single select menu.
    """

    def __init__(self, *, id: int = None) -> None:
        self.id = id
        self._components: List[Union[BaseSelect, Button, SelectMenuBuilder]] = []

    def button(
        self, style: Union[ButtonStyle, int, str], *, label: str = None,
        emoji: Any = None, custom_id: str = None, url: str = None,
        disabled: bool = None, id: int = None
    ) -> Button:
        """Add a button to this action row. See :func:`make_button`."""
        self._check_open()
        button = make_button(style, label=label, emoji=emoji,
                             custom_id=custom_id, url=url,
                             disabled=disabled, id=id)
        self._components.append(button)
        return button

    def string_select(
        self, custom_id: str, options: Iterable[SelectOption] = (),
        configure: Configure = None, **kwargs
    ) -> SelectMenuBuilder:
        """Add a select menu of developer-defined options.

        Options can be given up front or added with
        :meth:`SelectMenuBuilder.option`, either on the returned builder
        or inside ``configure``, which is called with the builder.
        Other keyword arguments are as for :class:`BaseSelect`.
        """
        self._check_open()
        builder = SelectMenuBuilder(custom_id, options, **kwargs)
        self._components.append(builder)
        if configure is not None:
            configure(builder)
        return builder

    select_menu = string_select

    def _entity_select(self, cls: Type[B], custom_id: str, **kwargs) -> B:
        self._check_open()
        select = cls(custom_id, **kwargs)
        self._components.append(select)
        return select

    def user_select(self, custom_id: str, **kwargs) -> UserSelect:
        """Add a select menu of users."""
        return self._entity_select(UserSelect, custom_id, **kwargs)

    def role_select(self, custom_id: str, **kwargs) -> RoleSelect:
        """Add a select menu of roles."""
        return self._entity_select(RoleSelect, custom_id, **kwargs)

    def mentionable_select(self, custom_id: str, **kwargs) -> MentionableSelect:
        """Add a select menu of users and roles."""
        return self._entity_select(MentionableSelect, custom_id, **kwargs)

    def channel_select(self, custom_id: str, **kwargs) -> ChannelSelect:
        """Add a select menu of channels.
        Pass ``channel_types`` to restrict which kinds are offered."""
        return self._entity_select(ChannelSelect, custom_id, **kwargs)

    def _freeze(self) -> None:
        super()._freeze()
        for item in self._components:
            if isinstance(item, _Builder):
                item._freeze()

    def build(self) -> ActionRow:
        row = ActionRow([_build(c) for c in self._components], id=self.id)
        if len(row) > 5 or (row.select_menus and len(row) > 1):
            warn(f'Action row has {len(row)} components, Discord will '
                 'reject more than five buttons or one select menu',
                 LayoutWarning)
        return row

class SectionBuilder(_Builder):
    """Builds a :class:`Section`. A section must end up with exactly one
    accessory, set with :meth:`thumbnail` or :meth:`button`."""

    def __init__(
        self, components: Iterable[Union[str, TextDisplay]] = (),
        accessory: Union[Button, Thumbnail] = None, *, id: int = None
    ) -> None:
        self.id = id
        self.components = [TextDisplay(c) if isinstance(c, str) else c
                           for c in components]
        self.accessory = accessory

    def text_display(self, content: str, *, id: int = None) -> TextDisplay:
        """Add a text display to this section."""
        self._check_open()
        text = TextDisplay(content, id=id)
        self.components.append(text)
        return text

    def thumbnail(
        self, media: MediaLike, *, description: str = None,
        spoiler: bool = None, id: int = None
    ) -> Thumbnail:
        """Set the accessory to a thumbnail.

        :param media: An :class:`UnfurledMedia` or a URL.
        :param description: Alt text for the image.
        """
        self._check_open()
        self.accessory = Thumbnail(media, description=description,
                                   spoiler=spoiler, id=id)
        return self.accessory

    def button(self, style: Union[ButtonStyle, int, str], **kwargs) -> Button:
        """Set the accessory to a button. See :func:`make_button`."""
        self._check_open()
        self.accessory = make_button(style, **kwargs)
        return self.accessory

    def build(self) -> Section:
        if self.accessory is None:
            raise InvalidArgument('Section must have a button or thumbnail accessory')
        if isinstance(self.accessory, Button):
            self.accessory.validate()
        elif not isinstance(self.accessory, Thumbnail):
            raise InvalidArgument(
                f'{type(self.accessory).__name__} cannot be a section accessory')
        return Section(list(self.components), self.accessory, id=self.id)

class MediaGalleryBuilder(_Builder):
    """Builds a :class:`MediaGallery`."""

    def __init__(
        self, items: Iterable[MediaGalleryItem] = (), *, id: int = None
    ) -> None:
        self.id = id
        self.items = list(items)

    def item(
        self, media: MediaLike, *, description: str = None,
        spoiler: bool = None
    ) -> MediaGalleryItem:
        """Add an image or video to the gallery.

        :param media: An :class:`UnfurledMedia` or a URL.
        :param description: Alt text for this item.
        """
        self._check_open()
        item = MediaGalleryItem(UnfurledMedia.coerce(media),
                                description, spoiler)
        self.items.append(item)
        return item

    gallery_item = item

    def build(self) -> MediaGallery:
        return MediaGallery(list(self.items), id=self.id)

class _Layout(_Builder):
    """Component-adding methods shared by :class:`View` and
    :class:`ContainerBuilder`."""

    _allowed: Tuple[Type[MessageComponent], ...] = LAYOUT_TYPES
    _items: List[Any]

    def _append(self, item: B, configure: Configure = None) -> B:
        self._check_open()
        self._items.append(item)
        if configure is not None:
            configure(item)
        return item

    def _freeze(self) -> None:
        super()._freeze()
        for item in self._items:
            if isinstance(item, _Builder):
                item._freeze()

    def row(self, configure: Configure = None, *, id: int = None) -> RowBuilder:
        """Add an action row. Buttons and select menus go in here."""
        return self._append(RowBuilder(id=id), configure)

    action_row = row

    def text_display(self, content: str, *, id: int = None) -> TextDisplay:
        """Add markdown text."""
        return self._append(TextDisplay(content, id=id))

    def section(
        self, configure: Configure = None, *,
        components: Iterable[Union[str, TextDisplay]] = (),
        accessory: Union[Button, Thumbnail] = None, id: int = None
    ) -> SectionBuilder:
        """Add a section: text with a button or thumbnail next to it."""
        return self._append(
            SectionBuilder(components, accessory, id=id), configure)

    def media_gallery(
        self, configure: Configure = None, *,
        items: Iterable[MediaGalleryItem] = (), id: int = None
    ) -> MediaGalleryBuilder:
        """Add a gallery of images and videos."""
        return self._append(MediaGalleryBuilder(items, id=id), configure)

    def separator(
        self, *, divider: bool = True,
        spacing: Union[SeparatorSpacing, int, str] = None, id: int = None
    ) -> Separator:
        """Add a separator.

        :param divider: Whether to draw a line. Defaults to :const:`True`.
        :param spacing: ``'small'``, ``'large'``, or a
            :class:`SeparatorSpacing`.
        """
        return self._append(Separator(
            divider=divider, spacing=enum_value(SeparatorSpacing, spacing),
            id=id))

    def file(
        self, file: Union[str, UnfurledMedia, discord.File], *,
        spoiler: bool = None, id: int = None
    ) -> File:
        """Add an uploaded file.

        :param file: A file name (which becomes ``attachment://<name>``),
            an ``attachment://`` URL, an :class:`UnfurledMedia`, or the
            :class:`discord.File` being uploaded alongside.
        """
        return self._append(File(file, spoiler=spoiler, id=id))

    def add(self, component: MessageComponent) -> MessageComponent:
        """Add an already constructed component.

        :raises InvalidArgument: if the component cannot be placed here,
            or contains an invalid button.
        """
        if not isinstance(component, self._allowed):
            raise InvalidArgument(
                f'{type(component).__name__} cannot be placed here')
        _validate_tree(component)
        return self._append(component)

class ContainerBuilder(_Layout):
    """Builds a :class:`Container`, which groups other components and
    can have an accent colour and be spoilered."""

    def __init__(
        self, components: Iterable[MessageComponent] = (), *,
        colour: Any = None, spoiler: bool = None, id: int = None
    ) -> None:
        self.id = id
        self.spoiler = spoiler
        self.colour = colour
        self._items = []
        for comp in components:
            self.add(comp)

    @property
    def colour(self) -> Optional[int]:
        """The colour of the bar to the side, as a packed integer.

        Can be set to anything :func:`normalize_color` accepts.
        """
        return self._colour

    @colour.setter
    def colour(self, value: Any) -> None:
        self._check_open()
        self._colour = normalize_color(value)

    color = colour

    def build(self) -> Container:
        return Container([_build(item) for item in self._items],
                         accent_color=self.colour, spoiler=self.spoiler,
                         id=self.id)

class View(_Layout):
    """The components of a message, with builder methods.

    Either call the builder methods on a view directly, or pass
    a function that does so::

        def layout(view):
            container = view.container(colour='#5865F2')
            container.text_display('## Hello')
            container.row().button('link', label='Docs', url=DOCS)

        payload = View(layout).to_payload()

    Builder methods for composite components return the child builder,
    and also accept a ``configure`` function that is called with it.

    A view is a write-only description: once :meth:`to_dict` (or
    anything that calls it) has run, it can no longer be changed.
    """

    _allowed = TOP_LEVEL_TYPES

    def __init__(self, configure: Configure = None) -> None:
        self._items = []
        self._built: Optional[List[MessageComponent]] = None
        self._wire: List[dict] = []
        if configure is not None:
            configure(self)

    def container(
        self, configure: Configure = None, *,
        components: Iterable[MessageComponent] = (),
        colour: Any = None, color: Any = None,
        spoiler: bool = None, id: int = None
    ) -> ContainerBuilder:
        """Add a container.

        :param colour: Anything :func:`normalize_color` accepts.
        :param color: Alias for ``colour``.
        """
        builder = ContainerBuilder(
            components, colour=colour if colour is not None else color,
            spoiler=spoiler, id=id)
        return self._append(builder, configure)

    def _finalize(self) -> List[MessageComponent]:
        if self._built is None:
            built = [_build(item) for item in self._items]
            for comp in built:
                _validate_tree(comp)
            self._freeze()
            # detached from anything the builder methods handed out
            self._built = copy.deepcopy(built)
            self._wire = [comp.to_dict() for comp in self._built]
        return self._built

    @property
    def components(self) -> List[MessageComponent]:
        """The finished components. Finalizes the view."""
        return copy.deepcopy(self._finalize())

    @property
    def flags(self) -> MessageFlags:
        """:attr:`MessageFlags.IS_COMPONENTS_V2` if any top-level
        component is not an action row, which Discord requires to be
        set on the message."""
        if any(not isinstance(c, ActionRow) for c in self._finalize()):
            return MessageFlags.IS_COMPONENTS_V2
        return MessageFlags(0)

    def to_dict(self) -> List[dict]:
        """Render the components to a list of dictionaries."""
        self._finalize()
        return copy.deepcopy(self._wire)

    def to_payload(self) -> dict:
        """Render a message payload with the components and flags."""
        payload = {'components': self.to_dict()}
        flags = self.flags
        if flags:
            payload['flags'] = int(flags)
        return payload

    def __len__(self) -> int:
        return len(self._items)

class Modal:
    """A popup form with text inputs, sent in response to an interaction.

    :param str custom_id: Arbitrary dev-defined ID.
    :param str title: Shown at the top of the form.
    """

    def __init__(
        self, custom_id: str, title: str, configure: Configure = None
    ) -> None:
        self.custom_id = custom_id
        self.title = title
        self.rows: List[ActionRow] = []
        if configure is not None:
            configure(self)

    def text_input(
        self, custom_id: str, label: str,
        style: Union[TextInputStyle, int, str] = TextInputStyle.SHORT,
        **kwargs
    ) -> TextInput:
        """Add a text input in its own row. Other keyword arguments are
        as for :class:`TextInput`."""
        text_input = TextInput(custom_id, enum_value(TextInputStyle, style),
                               label=label, **kwargs)
        self.rows.append(ActionRow(text_input))
        return text_input

    def to_dict(self) -> dict:
        return {
            'custom_id': self.custom_id,
            'title': self.title,
            'components': [row.to_dict() for row in self.rows]
        }
