"""
RAG answer prompt.

Single fixed template instructing the model to answer only from the supplied
context and to say so when the context is insufficient.

Dependencies: langchain_core.prompts
System role: Prompt template for answer synthesis
"""

from langchain_core.prompts import PromptTemplate

CONTEXT_SEPARATOR = "\n\n---\n\n"

INSUFFICIENT_CONTEXT_REPLY = (
    "I don't have enough information in the provided documents to answer that."
)

RAG_PROMPT_TEMPLATE = """You are a helpful AI assistant. Based on the following CONTEXT, please answer the QUESTION.
If the context does not provide enough information, say "{insufficient_reply}"

CONTEXT:
{context}

QUESTION:
{question}"""

RAG_PROMPT = PromptTemplate.from_template(RAG_PROMPT_TEMPLATE).partial(
    insufficient_reply=INSUFFICIENT_CONTEXT_REPLY,
)


def build_context(chunks: list[str]) -> str:
    """Join chunk texts in rank order with the context separator."""
    return CONTEXT_SEPARATOR.join(chunks)


def render_prompt(context: str, question: str) -> str:
    """
    Render the answer prompt.

    Args:
        context: Joined chunk texts
        question: User question

    Returns:
        str: Prompt text
    """
    return RAG_PROMPT.format(context=context, question=question)
