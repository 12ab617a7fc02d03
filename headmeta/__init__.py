"""Page metadata model and Vue Meta serializer."""

from .hid import hid
from .models import MetaData, VueMetaData
from .serializer import dumps, to_vue_meta_json

__all__ = ["MetaData", "VueMetaData", "dumps", "hid", "to_vue_meta_json"]
