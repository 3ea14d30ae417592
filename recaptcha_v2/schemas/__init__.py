from recaptcha_v2.schemas.render import RenderOptions
from recaptcha_v2.schemas.verify import VerifyRequest, VerifyResult

__all__ = ["RenderOptions", "VerifyRequest", "VerifyResult"]
