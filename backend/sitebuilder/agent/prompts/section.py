SECTION_PROMPT_TEMPLATE = """
Generate a comprehensive React component for the "{section_name}" section of a website.
The output should meet the following requirements:

1. **React JSX**: The output should be valid JSX, ready to drop into a React component.
2. **Styling**: Use TailwindCSS utility classes for layout, spacing, typography, colors, and responsiveness.
   Optionally, you can use MUI components for cards, buttons, grids, or typography where appropriate.
3. **Content**:
   - Include headings, subheadings, paragraphs, lists, buttons, and calls-to-action relevant to the section.
   - Include placeholder images using URLs like "https://picsum.photos/seed/{{random}}/400/300".
   - Content should be engaging, relevant to the website's purpose, and consistent with the theme of previous sections.
4. **Interactivity**: If relevant, include interactive elements (buttons, links, hover effects, etc.).
5. **Semantics & Accessibility**: Use semantic HTML/JSX and proper accessibility attributes (alt for images, aria labels for interactive elements).
6. **Data Handling**: Assume dynamic content may come from props or API calls, and include example placeholders.
7. **No extraneous text**: Output only the JSX code, do not explain or add commentary.

Example placeholders can include:
- <img src="https://picsum.photos/seed/1/400/300" alt="Random image" />
- <button className="bg-blue-500 hover:bg-blue-600 text-white px-4 py-2 rounded">Click Me</button>

The final component should be **production-ready**, fully styled, and modular.
""".strip()
