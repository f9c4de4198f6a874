# mdhelp/ui/core/__init__.py
# Rich building blocks shared by the help renderer & CLI listings

from .markdown import ElasticRule, FlushHeading, HelpMarkdown, measure_content_width
from .rich_components import themed_table

__all__ = [
    "ElasticRule",
    "FlushHeading",
    "HelpMarkdown",
    "measure_content_width",
    "themed_table",
]
