# models_bootstrap.py
from user import models as _user_models
from teammember import models as _teammember_models
from shifttype import models as _shifttype_models
from shift import models as _shift_models
