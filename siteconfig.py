#!/usr/bin/env python

import warnings
from CustomMDExtension import markdown_renderer
from CustomExceptions import (InvalidSettingsError, UnknownLibraryError,
                              UnknownOptionWarning)
import config


KNOWN_FORMATS = [
    'njk',
    'md',
    'css',
    'yml',
]


class EngineConfig:
    """
    Library registry handed to configure(). Keys are template format
    names (one of KNOWN_FORMATS), values are the renderer used for that
    format.
    """
    def __init__(self):
        self.libraries = {}

    def set_library(self, name, library):
        if name not in KNOWN_FORMATS:
            raise UnknownLibraryError(name)
        self.libraries[name] = library

    def get_library(self, name):
        return self.libraries.get(name)


def configure(engine_config):
    """
    Register the Markdown renderer under "md" and return the build
    settings. A new dictionary is built on every call.
    Keys are the engine's boundary record in snake_case:
    passthroughFileCopy, templateFormats, htmlTemplateEngine.
    """
    md = markdown_renderer(config.MARKDOWN_OPTIONS)
    engine_config.set_library('md', md)

    return {
        'dir': {
            'input': config.INPUT_DIRECTORY,
            'output': config.OUTPUT_DIRECTORY,
        },
        'passthrough_file_copy': config.PASSTHROUGH_FILE_COPY,
        'template_formats': list(config.TEMPLATE_FORMATS),
        'html_template_engine': config.HTML_TEMPLATE_ENGINE,
    }


def check_settings(settings):
    """
    Raises InvalidSettingsError if:
        - input and output directories are the same
        - no template format is given
        - the HTML template engine is not one of the template formats
    """
    directories = settings['dir']
    if directories['input'] == directories['output']:
        raise InvalidSettingsError(
            f'Input and output directories are both {directories["input"]}.'
        )

    formats = settings['template_formats']
    if not formats:
        raise InvalidSettingsError('No template format given.')

    engine = settings['html_template_engine']
    if engine not in formats:
        raise InvalidSettingsError(
            f'{engine} is not one of the template formats.'
        )
    return settings


def set_warning_filter():
    if config.STRICT:
        warnings.simplefilter("error", UnknownOptionWarning)
    else:
        warnings.simplefilter("default", UnknownOptionWarning)


def main():
    set_warning_filter()
    engine_config = EngineConfig()
    settings = check_settings(configure(engine_config))

    print(f'Input directory: {settings["dir"]["input"]}')
    print(f'Output directory: {settings["dir"]["output"]}')
    print(f'Template formats: {", ".join(settings["template_formats"])}')
    print(f'HTML template engine: {settings["html_template_engine"]}')
    print(f'Passthrough file copy: {settings["passthrough_file_copy"]}')
    print(f'Libraries: {", ".join(sorted(engine_config.libraries))}')


if __name__ == '__main__':
    main()
