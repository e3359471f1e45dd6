import os

import pytest

DATA = os.path.join(os.path.dirname(__file__), "data")


def word_line(token_id="1", form="word", lemma="word", upos="NOUN", xpos="_", feats="_", head="_",
              deprel="_", deps="_", misc="_"):
    """ Ten tab-separated columns """
    return "\t".join([token_id, form, lemma, upos, xpos, feats, head, deprel, deps, misc])


@pytest.fixture
def sample():
    """ three sentences with a multiword token, an empty node and non-ASCII DEPS """
    return os.path.join(DATA, "sample.conllu")


@pytest.fixture
def malformed():
    """ two sentences, one bad DEPREL (line 3) and one range HEAD (line 8) """
    return os.path.join(DATA, "malformed.conllu")


@pytest.fixture
def comment_inside():
    return os.path.join(DATA, "comment_inside.conllu")


@pytest.fixture
def empty():
    return os.path.join(DATA, "empty.conllu")
