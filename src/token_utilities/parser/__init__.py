from token_utilities.parser.media import merge_media_variants, parse_custom_media
from token_utilities.parser.tokens import DesignTokens, parse_tokens

__all__ = ["DesignTokens", "merge_media_variants", "parse_custom_media", "parse_tokens"]
