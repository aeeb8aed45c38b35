from cardindex.services.augmenter import EASTER_EGG_PRINTING, augment
from cardindex.services.card_names import card_name_key, normalize_card_name
from cardindex.services.classifier import classify, include
from cardindex.services.face_expander import expand, expand_all
from cardindex.services.index_writer import serialize_card_index, write_card_index
from cardindex.services.ordering import compare_printings, sort_printings
from cardindex.services.pipeline import build_card_index, build_printings
from cardindex.services.projector import build_image_url, is_promo, project, project_all
from cardindex.services.reducer import compress, reduce_printings
from cardindex.services.rules import DEFAULT_RULES, ClassificationRules
from cardindex.services.sanity import verify_card_index

__all__ = [
    "DEFAULT_RULES",
    "EASTER_EGG_PRINTING",
    "ClassificationRules",
    "augment",
    "build_card_index",
    "build_image_url",
    "build_printings",
    "card_name_key",
    "classify",
    "compare_printings",
    "compress",
    "expand",
    "expand_all",
    "include",
    "is_promo",
    "normalize_card_name",
    "project",
    "project_all",
    "reduce_printings",
    "serialize_card_index",
    "sort_printings",
    "verify_card_index",
    "write_card_index",
]
