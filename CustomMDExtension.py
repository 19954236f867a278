#!/usr/bin/env python

import warnings
import markdown
from markdown.extensions import Extension
from CustomExceptions import UnknownOptionWarning


RENDERER_OPTIONS = {
    'html': False,
}


class RawHtml(Extension):
    def __init__(self, **kwargs):
        self.config = {
            'html': [RENDERER_OPTIONS['html'],
                     'Pass embedded HTML through unescaped']
        }
        super(RawHtml, self).__init__(**kwargs)

    def extendMarkdown(self, md):
        if not self.getConfig('html'):
            # Without these, raw tags are treated as text and escaped
            md.preprocessors.deregister('html_block')
            md.inlinePatterns.deregister('html')


def markdown_renderer(options=None):
    """
    Build a Markdown renderer from an options dictionary.
    Unknown keys are reported with UnknownOptionWarning and ignored.
    """
    settings = dict(RENDERER_OPTIONS)
    for key, value in (options or {}).items():
        if key in settings:
            settings[key] = value
        else:
            warnings.warn(key, UnknownOptionWarning)

    return markdown.Markdown(extensions=[
        RawHtml(html=bool(settings['html'])),
    ])


def render(renderer, text):
    return renderer.reset().convert(text)
