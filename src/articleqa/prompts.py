"""Prompt template for answering questions from retrieved article context."""

from langchain_core.prompt_values import PromptValue
from langchain_core.prompts import ChatPromptTemplate

DECLINE_PHRASE = "I cannot answer this question based on the provided article content."

QA_TEMPLATE = """You are an assistant for question-answering tasks. Use ONLY the following pieces of retrieved context to answer the question.

STRICT RULES:
- If the answer is not in the provided context, say "{decline}"
- Do not use any external knowledge beyond what's in the context
- Stay focused on the article content only
- Use three sentences maximum and keep the answer concise

Context: {{context}}

Question: {{question}}

Answer based ONLY on the context above:""".format(decline=DECLINE_PHRASE)

QA_PROMPT = ChatPromptTemplate.from_template(QA_TEMPLATE)


def format_prompt(question: str, context: str) -> PromptValue:
    """Fill the QA template; the result can be passed straight to a chat model."""
    return QA_PROMPT.invoke({"question": question, "context": context})


def render_prompt(question: str, context: str) -> str:
    """Return the filled-in QA template as plain text."""
    return format_prompt(question, context).to_messages()[0].content
