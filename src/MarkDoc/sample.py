SAMPLE_MARKDOWN = """\
# Welcome to Markdown to DOC Converter

This is a powerful tool to convert Markdown to Microsoft Word documents with beautiful formatting.

## Features

- **Bold text** and *italic text* support
- Headings (H1 to H4)
- Bullet lists and numbered lists
- `Inline code` and code blocks
- Tables with custom alignment
- Blockquotes for emphasis

### Example Table

| Feature | Status | Priority |
|:--------|:------:|--------:|
| Bold/Italic | ✓ | High |
| Code Blocks | ✓ | High |
| Tables | ✓ | Medium |
| Images | Coming Soon | Low |

### Code Example

```javascript
function greet(name) {
  return `Hello, ${name}!`;
}

console.log(greet('World'));
```

### How to Use

1. Type or paste your Markdown content in a file
2. Preview the formatted content as HTML
3. Convert it to DOCX
4. Open your professionally formatted Word document

> **Tip:** The preview shows exactly how your content will look, including tables and code blocks!

#### Additional Information

You can use standard Markdown syntax:

- Create lists with dashes or asterisks
- Use ** for bold and * for italic
- Use backticks for inline code
- Use # symbols for headings
- Create tables with pipes and dashes

Happy writing!"""
