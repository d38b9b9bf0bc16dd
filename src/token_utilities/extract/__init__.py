from token_utilities.extract.extractor import ClassExtractor, is_valid_class_name

__all__ = ["ClassExtractor", "is_valid_class_name"]
