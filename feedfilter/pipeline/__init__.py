"""Filter pipeline: load candidate items and run the keyword filter over them."""

from .exceptions import ItemsFileError
from .items import load_items
from .models import PipelineRunResult
from .runner import FilterPipeline

__all__ = ["FilterPipeline", "PipelineRunResult", "ItemsFileError", "load_items"]
