"""
Utilidades de texto (tokenización, chunking).

Importar desde los submódulos (`text.tokenizer`, `text.chunker`): el embedder
depende del tokenizer y el chunker del embedder.
"""
