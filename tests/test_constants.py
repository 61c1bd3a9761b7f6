from stylex_fold import constants
from stylex_fold.config import FoldConfig


def test_defaults_follow_fold_config():
    config = FoldConfig()

    assert constants.MARKER_TOKENS == config.marker_tokens
    assert constants.SOURCE_EXTENSIONS == config.extensions
    assert constants.DEFAULT_MAX_FILE_SIZE == config.max_file_size


def test_module_exports_only_used_defaults():
    public = {name for name in vars(constants) if name.isupper()}

    assert public == {
        "DEFAULT_CONFIG",
        "SINGLE_LINE_CLOSER",
        "MARKER_TOKENS",
        "SOURCE_EXTENSIONS",
        "DEFAULT_MAX_FILE_SIZE",
        "SINGLE_LEVEL",
        "UNBOUNDED_DEPTH",
    }
