"""articleqa: question answering over a single web article.

A small retrieval-augmented generation loop built on LangChain and Ollama:
- Fetching an article and extracting its paragraphs
- Sliding-window chunking and an in-memory vector index
- Prompting a chat model with the retrieved context

Modules:
    loaders: Web article loading
    pipeline: Retrieve and generate steps
    session: Interactive console loop
    cli: Command-line interface
"""
