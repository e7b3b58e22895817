"""
View Module

In-memory document, builders and the controllers that mutate the mounted view.
"""

from services.author_directory.view.nodes import Event, Fragment, SelectControl, ViewNode
from services.author_directory.view.state import ViewState
from services.author_directory.view.builder import ViewBuilder
from services.author_directory.view.disclosure import DisclosureController
from services.author_directory.view.listeners import ListenerRegistry
from services.author_directory.view.renderer import HtmlRenderer

__all__ = [
    'Event',
    'Fragment',
    'SelectControl',
    'ViewNode',
    'ViewState',
    'ViewBuilder',
    'DisclosureController',
    'ListenerRegistry',
    'HtmlRenderer'
]
