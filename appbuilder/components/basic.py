from .base import BaseComponent

BUTTON_VARIANTS = ["default", "destructive", "outline", "secondary", "ghost", "link"]
INPUT_TYPES = ["text", "password", "email", "number", "tel", "url"]

class ButtonComponent(BaseComponent):
    COMPONENT_TYPE = "button"
    NAME = "Button"
    ICON = "🔘"
    DESCRIPTION = "A clickable button element"
    CATEGORY = "Basic UI"
    DEFAULT_WIDTH = 120
    DEFAULT_HEIGHT = 40
    DEFAULT_PROPS = {"text": "Button", "variant": "default", "size": "default"}
    INPUTS = []
    OUTPUTS = [("click", "Click")]
    FIELDS = [
        {"name": "text", "label": "Text", "kind": "text"},
        {"name": "variant", "label": "Variant", "kind": "select", "options": BUTTON_VARIANTS},
        {"name": "size", "label": "Size", "kind": "select", "options": ["default", "sm", "lg"]},
    ]

class TextComponent(BaseComponent):
    COMPONENT_TYPE = "text"
    NAME = "Text"
    ICON = "📝"
    DESCRIPTION = "A text display element"
    CATEGORY = "Basic UI"
    DEFAULT_WIDTH = 200
    DEFAULT_HEIGHT = 30
    DEFAULT_PROPS = {"text": "Text content", "size": "default", "weight": "normal"}
    FIELDS = [
        {"name": "text", "label": "Text", "kind": "textarea"},
        {"name": "size", "label": "Size", "kind": "select", "options": ["small", "default", "large"]},
        {"name": "weight", "label": "Weight", "kind": "select", "options": ["normal", "semibold", "bold"]},
    ]

class InputComponent(BaseComponent):
    COMPONENT_TYPE = "input"
    NAME = "Input"
    ICON = "✏️"
    DESCRIPTION = "A text input field"
    CATEGORY = "Basic UI"
    DEFAULT_WIDTH = 200
    DEFAULT_HEIGHT = 40
    DEFAULT_PROPS = {"placeholder": "Enter text...", "type": "text"}
    INPUTS = [("value", "Value")]
    OUTPUTS = [("change", "Change"), ("submit", "Submit")]
    FIELDS = [
        {"name": "placeholder", "label": "Placeholder", "kind": "text"},
        {"name": "type", "label": "Type", "kind": "select", "options": INPUT_TYPES},
    ]

class ImageComponent(BaseComponent):
    COMPONENT_TYPE = "image"
    NAME = "Image"
    ICON = "🖼️"
    DESCRIPTION = "An image display element"
    CATEGORY = "Basic UI"
    DEFAULT_WIDTH = 200
    DEFAULT_HEIGHT = 200
    DEFAULT_PROPS = {"src": "https://via.placeholder.com/200", "alt": "Image"}
    FIELDS = [
        {"name": "src", "label": "Image URL", "kind": "text"},
        {"name": "alt", "label": "Alt Text", "kind": "text"},
    ]
