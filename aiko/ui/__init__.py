"""NiceGUI interface - thin visualization layer for the conversation.

Responsibilities:
    - Message list with distinct user, assistant and summary-note treatments
    - Image attachment picker and preview
    - Busy indicator, suggestion chips and inline errors

Contains no business logic. Subscribes to the conversation store and
delegates every action to the chat controller.
"""
