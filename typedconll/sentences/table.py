import pandas as pd

from .data import Sentence

COLUMNS = ["sentence", "kind", "id", "form", "lemma", "upos", "xpos", "feats", "head", "deprel", "deps", "misc"]


def to_dataframe(sentences: list[Sentence]) -> pd.DataFrame:
    """
    One row per token, multiword token and empty node. Comments are left out.
    IDs and DEPS keys are rendered as in the file ("1-2", "8.1").
    :param sentences: Parsed sentences
    :return: DataFrame with the columns in ``COLUMNS``; ``sentence`` is the 1-based sentence index
    """
    table = {column: [] for column in COLUMNS}
    for i, sentence in enumerate(sentences, start=1):
        for word in sentence.words:
            table["sentence"].append(i)
            table["kind"].append(word.kind.value)
            table["id"].append(str(word.id))
            table["form"].append(word.form)
            table["lemma"].append(word.lemma)
            table["upos"].append(word.upos)
            table["xpos"].append(word.xpos)
            table["feats"].append(word.feats)
            table["head"].append(word.head)
            table["deprel"].append(word.deprel)
            table["deps"].append({str(ref): rel for ref, rel in word.deps.items()}
                                 if word.deps is not None else None)
            table["misc"].append(word.misc)
    dataframe = pd.DataFrame.from_dict(table)
    dataframe["head"] = dataframe["head"].astype("Int64")
    return dataframe
