CHAT_PROMPT_TEMPLATE = """
User asked: "{message}"

As a helpful assistant for this website, provide a relevant and helpful response
based on the website's content and purpose. Be friendly and informative.
""".strip()
