from marshmallow import Schema, fields, validate, EXCLUDE
from calorie_tracker.utils.enums import Sex, ActivityLevel


class ProfileSchema(Schema):
    """Profile upsert body. Every field optional; only present keys are written."""

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(allow_none=True)
    weight = fields.Float(validate=validate.Range(min=1, max=500))
    height = fields.Float(validate=validate.Range(min=50, max=300))
    age = fields.Int(validate=validate.Range(min=1, max=120))
    sex = fields.Str(validate=validate.OneOf([e.value for e in Sex]))
    activity_level = fields.Str(validate=validate.OneOf([e.value for e in ActivityLevel]))
    calorie_goal = fields.Float(allow_none=True, validate=validate.Range(min=0))
    protein_goal = fields.Float(allow_none=True, validate=validate.Range(min=0))
    carbs_goal = fields.Float(allow_none=True, validate=validate.Range(min=0))
    fat_goal = fields.Float(allow_none=True, validate=validate.Range(min=0))
