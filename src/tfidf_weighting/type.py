from typing import NewType, Sequence


Token = NewType("Token", str)
RawDocument = NewType("RawDocument", str)
Document = NewType("Document", Sequence[Token])
Corpus = NewType("Corpus", Sequence[Document])
