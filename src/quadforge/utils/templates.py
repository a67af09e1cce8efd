"""Template rendering utilities."""

import logging
from typing import Any
from jinja2 import Environment, BaseLoader, StrictUndefined, TemplateError


logger = logging.getLogger(__name__)


class StringTemplateLoader(BaseLoader):
    """Template loader for string templates."""
    
    def __init__(self, template_string: str):
        self.template_string = template_string
        
    def get_source(self, environment, template):
        return self.template_string, None, lambda: True


def render_template(template_str: str, **context: Any) -> str:
    """Render a Jinja2 template string with given context."""
    try:
        # Block tags on their own line leave no blank line behind
        env = Environment(
            loader=StringTemplateLoader(template_str),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        
        template = env.get_template("")
        
        return template.render(**context)
        
    except TemplateError as e:
        logger.error(f"Template rendering error: {e}")
        raise


def render_unit(template_str: str, **context: Any) -> str:
    """Render a unit file template, trimmed of surrounding whitespace."""
    return render_template(template_str, **context).strip()
