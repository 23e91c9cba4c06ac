"""Modern European profiles: Albanian, Turkish, German and the Latin default."""

import re

from ..schema import ConsonantClass
from .base import LanguageProfile

P = ConsonantClass.PLOSIVE
AF = ConsonantClass.AFFRICATE
SF = ConsonantClass.SIBILANT_FRICATIVE
NF = ConsonantClass.NON_SIBILANT_FRICATIVE
N = ConsonantClass.NASAL
L = ConsonantClass.LIQUID
G = ConsonantClass.GLIDE


class AlbanianProfile(LanguageProfile):
    """Albanian orthography (ë, ç and the digraph alphabet)."""

    id = "albanian"
    DETECT = re.compile(r"[ëç]|xh|zh|sh|dh|th|nj|gj|ll|rr|q")
    DIGRAPHS = {
        "ll": L, "rr": L,
        "nj": N,
        "sh": SF, "zh": SF,
        "dh": NF, "th": NF,
        "xh": AF,
        "gj": P,
    }
    LETTERS = {
        "c": AF, "ç": AF, "x": AF,
        "q": P, "k": P, "g": P, "p": P, "b": P, "t": P, "d": P,
        "f": NF, "v": NF, "h": NF,
        "s": SF, "z": SF,
        "j": G, "w": G,
        "m": N, "n": N,
        "l": L, "r": L,
    }


class TurkishProfile(LanguageProfile):
    """Turkish orthography (ç, ğ, ş, ı and a hard c/j)."""

    id = "turkish"
    DETECT = re.compile(r"[çğşıöü]|sch|c(?!h)|j")
    DIGRAPHS = {
        "ch": AF,
    }
    LETTERS = {
        "c": AF, "ç": AF,
        "s": SF, "z": SF, "ş": SF, "j": SF, "x": SF,
        "f": NF, "v": NF, "h": NF,
        "p": P, "b": P, "t": P, "d": P, "k": P, "g": P, "q": P,
        "m": N, "n": N,
        "l": L, "r": L,
        "y": G, "w": G, "ğ": G,
    }


class GermanProfile(LanguageProfile):
    """German orthography (sch, qu, pf, st/sp onsets, umlauts, ß)."""

    id = "german"
    DETECT = re.compile(r"sch|qu|pf|sp|st|[äöüß]")
    DIGRAPHS = {
        "ch": NF,
        "qu": P, "ck": P, "pf": P,
        "ts": AF,
    }
    LETTERS = {
        "p": P, "b": P, "t": P, "d": P, "k": P, "g": P, "q": P, "c": P,
        "f": NF, "v": NF, "h": NF,
        "s": SF, "z": SF, "ß": SF, "x": SF,
        "j": AF,
        "m": N, "n": N,
        "l": L, "r": L,
        "w": G, "y": G,
    }


class LatinProfile(LanguageProfile):
    """Plain Latin alphabet. Default profile; never self-detects."""

    id = "latin"
    DETECT = None
    DIGRAPHS = {
        "ch": AF, "ts": AF, "dz": AF,
        "sh": SF, "zh": SF,
        "th": NF, "ph": NF,
        "ck": P,
    }
    LETTERS = {
        "p": P, "b": P, "t": P, "d": P, "k": P, "g": P, "q": P, "c": P,
        "f": NF, "v": NF, "h": NF,
        "s": SF, "z": SF, "x": SF,
        "j": AF,
        "m": N, "n": N,
        "l": L, "r": L,
        "w": G, "y": G,
    }
