import networkx as nx

from .data import Sentence

ROOT = 0


def dependency_graph(sentence: Sentence, enhanced: bool = False) -> nx.DiGraph:
    """
    Build the dependency graph of a sentence.

    Node 0 is the artificial root. The basic graph has one node per token and
    one edge per HEAD; the enhanced graph also has empty nodes and one edge per
    DEPS entry. Edges run from head to dependent and carry a ``deprel`` attribute.
    Multiword tokens are never part of the graph.

    :param sentence: Parsed sentence
    :param enhanced: Use DEPS instead of HEAD/DEPREL
    """
    graph = nx.DiGraph()
    graph.add_node(ROOT, form=None)
    words = sentence.tokens + sentence.ellipses if enhanced else sentence.tokens
    for word in words:
        graph.add_node(word.id, form=word.form, lemma=word.lemma, upos=word.upos)

    for word in words:
        if enhanced:
            for head, deprel in (word.deps or {}).items():
                graph.add_edge(head, word.id, deprel=deprel)
        elif word.head is not None:
            graph.add_edge(word.head, word.id, deprel=word.deprel)
    return graph


def is_tree(sentence: Sentence) -> bool:
    """True if HEAD gives every token exactly one head and no cycles, rooted in 0."""
    graph = dependency_graph(sentence)
    if any(word.head is None for word in sentence.tokens):
        return False
    return nx.is_arborescence(graph)
