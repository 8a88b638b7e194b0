"""CSS styles for the QR Frame terminal preview."""

CSS = """
Screen {
    background: #1e1e2e;
    align: center middle;
}

#frame-card {
    width: 80;
    height: auto;
    min-height: 12;
    padding: 1 2;
    border: round #3b82f6;
    align: center middle;
}

#frame-text {
    width: 100%;
    text-align: center;
    text-style: bold;
}

#frame-qr {
    width: auto;
    margin: 1 0;
}

#frame-footer {
    width: 100%;
    text-align: center;
    margin-top: 1;
}

#frame-input {
    width: 80;
    margin: 1 0 0 0;
}

#frame-actions {
    width: 80;
    height: auto;
    margin: 1 0 0 0;
}

Button {
    background: transparent;
    color: #3b82f6;
    border: none;
    height: 3;
    min-height: 3;
    min-width: 12;
    padding: 0 1;
    margin: 0;
    content-align: center middle;
}

Button:focus {
    background: #3b82f6;
    color: #ffffff;
    text-style: bold underline reverse;
}

Button.link {
    color: #22d3ee;
}

Button.reset {
    color: #fecaca;
}

ModalScreen {
    align: center middle;
}

#explorer-url {
    width: 80;
    padding: 1 0;
}

Horizontal {
    height: auto;
    margin: 0 0 1 0;
}
"""
