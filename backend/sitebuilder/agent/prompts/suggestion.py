SUGGESTION_PROMPT_TEMPLATE = """
Based on the website name "{name}" and description "{description}",
please provide detailed suggestions for additional content and features
that would enhance this website. Consider the target audience, key features,
unique selling points, and overall goals. Provide at least 300 words of
comprehensive suggestions.
""".strip()
