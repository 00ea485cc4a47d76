"""Known-good fake translations, used as a quick self-check of the whole pipeline."""

from typing import Callable, NamedTuple

from gobbledygook.translator import translate


class Sample(NamedTuple):
    source: str
    expected: str


SAMPLES: list[Sample] = [
    Sample("I LOVE YOU",
           "∩O⅄ ƎɅO⅂ I"),
    Sample("%s uses Persona to sign you in!",
           "¡uı noʎ uƃıs oʇ auosɹǝԀ sǝsn %s"),
    Sample("Please close this window, <a %s>enable cookies</a> and try again",
           "uıaƃa ʎɹʇ pua <a %s>sǝıʞooɔ ǝʅqauǝ</a> ´ʍopuıʍ sıɥʇ ǝsoʅɔ ǝsaǝʅԀ"),
    Sample("Please close this window, <a %(cookieLink)>enable <b>super dooper %(persona)</b> cookies</a> and try again",
           "uıaƃa ʎɹʇ pua <a %(cookieLink)>sǝıʞooɔ <b>%(persona) ɹǝdoop ɹǝdns</b> ǝʅqauǝ</a> ´ʍopuıʍ sıɥʇ ǝsoʅɔ ǝsaǝʅԀ"),
    Sample("%(aWebsite) uses Persona to sign you in!",
           "¡uı noʎ uƃıs oʇ auosɹǝԀ sǝsn %(aWebsite)"),
]


class Failure(NamedTuple):
    sample: Sample
    actual: str


def run_samples(samples: list[Sample] = SAMPLES, translate_fn: Callable[[str], str] = translate) -> list[Failure]:
    """Translate each sample, returning the ones that didn't come out as expected."""
    failures: list[Failure] = []
    for sample in samples:
        actual = translate_fn(sample.source)
        if actual != sample.expected:
            failures.append(Failure(sample, actual))
    return failures
