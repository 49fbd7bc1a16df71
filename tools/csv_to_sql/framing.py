"""Prefix and suffix templates written around the generated statements."""

import re
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from shared.logger import get_logger

from .errors import ConfigurationError

logger = get_logger(__name__)

# Escaped brace, placeholder, or a stray brace
TOKEN_PATTERN = re.compile(r"\\([{}])|\{\s*([A-Za-z_]\w*)\s*\}|[{}]")


@dataclass(frozen=True)
class TemplateContext:
    """Values available to framing templates."""

    table: str


def render_template(template: str, context: TemplateContext) -> str:
    """
    Substitute `{name}` placeholders in a template.

    `\\{` and `\\}` produce literal braces.

    Raises:
        ConfigurationError: On an unknown placeholder or an unbalanced brace
    """
    values = asdict(context)

    def replace(match: "re.Match[str]") -> str:
        escaped, name = match.group(1), match.group(2)
        if escaped:
            return escaped
        if name is None:
            line = template.count("\n", 0, match.start()) + 1
            raise ConfigurationError(f"Unbalanced '{match.group(0)}' in template at line {line}")
        if name not in values:
            raise ConfigurationError(f"Unknown template variable '{name}'")
        return str(values[name])

    return TOKEN_PATTERN.sub(replace, template)


def render_framing(path: Optional[Path], context: TemplateContext) -> str:
    """
    Render a prefix or suffix file.

    A missing file is not an error and renders as an empty string.

    Args:
        path: Template file
        context: Template values

    Returns:
        Rendered content followed by a blank line, or "" when there is no file
    """
    if path is None:
        return ""
    if not path.exists():
        logger.debug(f"Framing file not found, skipping: {path}")
        return ""
    if not path.is_file():
        logger.debug(f"Framing path is not a file, skipping: {path}")
        return ""

    try:
        with open(path, "r", encoding="utf-8") as f:
            template = "".join(f"{line}\n" for line in f.read().splitlines())
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read template {path}: {e}")

    try:
        rendered = render_template(template, context)
    except ConfigurationError as e:
        raise ConfigurationError(f"Invalid template {path}: {e}")

    logger.debug(f"Rendered framing file {path}")
    return f"{rendered}\n"
