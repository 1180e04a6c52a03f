class PromptComposerError(Exception):
    """Base exception for the prompt composer."""


class LibraryLoadError(PromptComposerError):
    def __init__(self, source: str, detail: str):
        self.source = source
        super().__init__(f"Failed to load prompt library from {source}: {detail}")


class TemplateRenderError(PromptComposerError):
    def __init__(self, template_name: str, detail: str):
        self.template_name = template_name
        super().__init__(f"Failed to render template '{template_name}': {detail}")
