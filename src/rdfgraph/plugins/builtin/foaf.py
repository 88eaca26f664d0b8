"""
FOAF agents.

Registered for the FOAF namespace: ``foaf:Person``, ``foaf:Agent``,
``foaf:Organization`` and ``foaf:Group`` elements are imported as
``FoafAgent`` nodes; other FOAF classes (documents, images) stay generic.

Usage:
    doc.from_import(root)
    alice = doc.subject("http://example.org/alice")
    alice.name, alice.nick, [friend.name for friend in alice.knows]
"""

from typing import List, Optional

from ...constants import Vocab
from ...core.node import SubjectNode
from ..registry import register_ontology

AGENT_CLASSES = ("Agent", "Person", "Organization", "Group")


@register_ontology(Vocab.FOAF)
class FoafAgent(SubjectNode):
    """
    A person, group or organization.

    After import the common FOAF properties are available as attributes,
    resolved for the preferred languages where they are text.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.name: Optional[str] = None
        self.nick: Optional[str] = None
        self.homepage: Optional[str] = None
        self.mbox: Optional[str] = None
        self.knows: List[SubjectNode] = []

    @classmethod
    def for_element(cls, namespace: str, local_name: str) -> Optional[SubjectNode]:
        if local_name not in AGENT_CLASSES:
            return None
        return cls()

    def transform(self) -> None:
        self.name = self.lang(Vocab.FOAF + "name")
        self.nick = self.lang(Vocab.FOAF + "nick")
        homepage = self.first(Vocab.FOAF + "homepage")
        self.homepage = str(homepage) if homepage is not None else None
        mbox = self.first(Vocab.FOAF + "mbox")
        self.mbox = str(mbox) if mbox is not None else None
        self.knows = [v for v in self.values(Vocab.FOAF + "knows") if isinstance(v, SubjectNode)]
