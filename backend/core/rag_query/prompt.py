"""
RAG answer prompt.

Defines the prompt template that grounds the chat model in retrieved context.

Dependencies: langchain_core.prompts
System role: Prompt template for answer synthesis
"""

from langchain_core.prompts import ChatPromptTemplate

NO_CONTEXT_ANSWER = "I couldn't find any information about that in your documents."

CONTEXT_SEPARATOR = "\n\n"

SYSTEM_PROMPT = """You are a helpful AI assistant named MemoryVault.
Use the following pieces of context to answer the question at the end.
If you don't know the answer based on the context, just say you don't know. Do not try to make up an answer."""

RAG_ANSWER_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", """CONTEXT:
{context}

QUESTION:
{question}

ANSWER:"""),
])


def build_context(chunks: list[str]) -> str:
    """Join chunk texts in ranked order, separated by a blank line."""
    return CONTEXT_SEPARATOR.join(chunks)
