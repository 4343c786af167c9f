"""CMS content model and its conversion into channel messages."""

from .callback import Callback, ContentCallback, ContentType
from .contents import (
    Button,
    ButtonStyle,
    Carousel,
    CommonFields,
    Content,
    ContentCallbackWithKeywords,
    ContentWithKeywords,
    Element,
    FollowUp,
    Image,
    StartUp,
    Text,
    TopContent,
    Url,
)
from .errors import (
    CmsError,
    ConversionError,
    FollowUpCycleError,
    FollowUpDepthError,
    UnknownFollowUpError,
    UnsupportedContentError,
)
from .render import MessageConverter, RenderOptions, get_default_converter

__all__ = [
    "Button",
    "ButtonStyle",
    "Callback",
    "Carousel",
    "CmsError",
    "CommonFields",
    "Content",
    "ContentCallback",
    "ContentCallbackWithKeywords",
    "ContentType",
    "ContentWithKeywords",
    "ConversionError",
    "Element",
    "FollowUp",
    "FollowUpCycleError",
    "FollowUpDepthError",
    "Image",
    "MessageConverter",
    "RenderOptions",
    "StartUp",
    "Text",
    "TopContent",
    "UnknownFollowUpError",
    "UnsupportedContentError",
    "Url",
    "get_default_converter",
]
