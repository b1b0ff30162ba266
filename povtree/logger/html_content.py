CSS_LOG = """
/* Base styles */
.content {
    font-family: 'Menlo', 'DejaVu Sans Mono', monospace;
    color: #e0e0e0;
    background: #1e1e1e;
    padding: 1em 2em;
}

.section {
    margin: 1.5em 0;
    padding: 1em;
    background: #2d2d2d;
    border-radius: 4px;
}

.subsection h4 {
    margin: 1em 0 0.5em;
    color: #8a9bbc;
}

.info {
    margin: 0.3em 0;
}

.debug {
    margin: 0.3em 0;
    color: #8a8a8a;
}

.warning {
    margin: 0.3em 0;
    color: #e5c07b;
}

.error {
    margin: 0.3em 0;
    color: #ff8080;
}

.result strong {
    color: #98c379;
}

/* S-expression and indented tree views */
.tree-view pre {
    background: #282c34;
    padding: 15px;
    border-radius: 5px;
    border-left: 4px solid #61afef;
    overflow-x: auto;
    white-space: pre;
}

.path {
    color: #61afef;
}

.path .arrow {
    color: #636b7c;
}
"""

HTML_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
{css}
</style>
</head>
<body>
{body}
</body>
</html>
"""
