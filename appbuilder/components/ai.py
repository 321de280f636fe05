from .base import BaseComponent

class ChatbotComponent(BaseComponent):
    """
    Chat interface backed by an agent. In the workflow view it takes user
    input and emits both the raw message and the agent's response.
    """
    COMPONENT_TYPE = "chatbot"
    NAME = "Chatbot"
    ICON = "🤖"
    DESCRIPTION = "An AI-powered chatbot interface"
    CATEGORY = "AI Components"
    DEFAULT_WIDTH = 350
    DEFAULT_HEIGHT = 400
    DEFAULT_PROPS = {
        "agentId": "",
        "placeholder": "Type your message...",
        "welcomeMessage": "Hello! How can I help you today?",
    }
    INPUTS = [("input", "Input")]
    OUTPUTS = [("message", "Message"), ("response", "Response")]
    FIELDS = [
        {"name": "agentId", "label": "Agent ID", "kind": "text"},
        {"name": "placeholder", "label": "Placeholder", "kind": "text"},
        {"name": "welcomeMessage", "label": "Welcome Message", "kind": "textarea"},
    ]

class TextGeneratorComponent(BaseComponent):
    COMPONENT_TYPE = "textGenerator"
    NAME = "Text Generator"
    ICON = "✨"
    DESCRIPTION = "Generate text using AI"
    CATEGORY = "AI Components"
    DEFAULT_WIDTH = 400
    DEFAULT_HEIGHT = 300
    DEFAULT_PROPS = {"prompt": "Generate a response about:", "maxLength": 500}

class KnowledgeSearchComponent(BaseComponent):
    COMPONENT_TYPE = "knowledgeSearch"
    NAME = "Knowledge Search"
    ICON = "🔍"
    DESCRIPTION = "Search through knowledge bases"
    CATEGORY = "AI Components"
    DEFAULT_WIDTH = 400
    DEFAULT_HEIGHT = 300
    DEFAULT_PROPS = {"knowledgeBaseId": "", "placeholder": "Search knowledge base..."}
