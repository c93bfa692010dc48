"""Prompt templates for retrieval-augmented answers."""

from ragchat.application.dto.chat_message import ChatMessage

FALLBACK_ANSWER = "I don't have enough information to answer that."

RAG_SYSTEM_PROMPT = f"""You are a helpful and factual AI assistant.
Use only the information provided in the retrieved context to answer the question.
If the answer cannot be found in the context, say "{FALLBACK_ANSWER}"

Follow these rules:
- Be concise, clear, and accurate.
- Do not fabricate or assume facts.
- Cite or refer to sources if available in the context.
"""

RAG_USER_PROMPT_TEMPLATE = """Question:
{{question}}

Context (retrieved documents):
{{context}}

Instructions:
1. Read the question carefully.
2. Review all the provided context snippets.
3. Provide the best possible answer using only the given information.
4. If the context does not contain the answer, respond with:
"%s"
""" % FALLBACK_ANSWER

CONTEXT_SEPARATOR = "\n\n"


def build_user_prompt(question: str, contexts: list[str]) -> str:
    """Fill the user template. Placeholders are replaced literally, context last,
    so braces or placeholder-like text inside the question are kept as typed."""
    head, tail = RAG_USER_PROMPT_TEMPLATE.split("{{context}}", 1)
    return (
        head.replace("{{question}}", question)
        + CONTEXT_SEPARATOR.join(contexts)
        + tail
    )


def build_messages(question: str, contexts: list[str]) -> list[ChatMessage]:
    """System instruction followed by the filled user prompt."""
    return [
        ChatMessage(role="system", content=RAG_SYSTEM_PROMPT),
        ChatMessage(role="user", content=build_user_prompt(question, contexts)),
    ]
