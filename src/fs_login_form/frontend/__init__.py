from . import collaborators
from . import components
from . import form_reducer
from . import login_form

__all__ = ["collaborators", "components", "form_reducer", "login_form"]
