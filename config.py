# INPUT
INPUT_DIRECTORY = 'content'  # Name of the input directory

# OUTPUT
OUTPUT_DIRECTORY = 'live'

# TEMPLATES
# File extensions handled as templates. Anything else is copied as-is
# when PASSTHROUGH_FILE_COPY is True.
TEMPLATE_FORMATS = ['njk', 'md', 'css', 'yml']
HTML_TEMPLATE_ENGINE = 'njk'
PASSTHROUGH_FILE_COPY = True

# MARKDOWN
# 'html': embedded HTML is written to the output unescaped
MARKDOWN_OPTIONS = {
    'html': True,
}

# OPTIONS
# If STRICT is True, unknown renderer options raise instead of warning.
STRICT = False
