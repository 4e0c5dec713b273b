from paragrapher import get_default_config, get_default_noise_config, resolve_options
from paragrapher.config import load_config


def test_default_values() -> None:
    cfg = load_config()
    assert cfg.schema_version == 1
    assert cfg.paragraphs.min_sentences == 2
    assert cfg.paragraphs.max_sentences == 4
    assert cfg.paragraphs.min_words == 80
    assert cfg.paragraphs.max_words == 120
    assert cfg.paragraphs.line_breaks == 1
    assert cfg.noise.sentence_variation == 4
    assert cfg.noise.word_variation == 10


def test_packaged_defaults_match_core_defaults() -> None:
    config, noise = resolve_options(load_config().to_options())
    assert config == get_default_config()
    assert noise == get_default_noise_config()
