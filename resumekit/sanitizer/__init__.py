from resumekit.sanitizer.models import SanitizedNode
from resumekit.sanitizer.sanitizer import ContentSanitizer
from resumekit.sanitizer.urls import is_safe_url

__all__ = ["ContentSanitizer", "SanitizedNode", "is_safe_url"]
