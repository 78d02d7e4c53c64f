from marshmallow import Schema, fields, validate, EXCLUDE
from calorie_tracker.utils.http import valid_id

non_negative = validate.Range(min=0)

MAX_MEAL_ORDER = 10000


class CreateMealPlanSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    action = fields.Str(validate=validate.Equal("create"))
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    target_calories = fields.Float(load_default=0, validate=non_negative)


class CreateDefaultMealPlansSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    action = fields.Str(validate=validate.Equal("createDefaults"))


class UpdateMealPlanSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(required=True, validate=valid_id)
    name = fields.Str(validate=validate.Length(min=1, max=100))
    target_calories = fields.Float(validate=non_negative)
    meal_order = fields.Int(validate=validate.Range(min=0, max=MAX_MEAL_ORDER))


MEAL_PLAN_ACTIONS = {
    "create": CreateMealPlanSchema,
    "createDefaults": CreateDefaultMealPlansSchema,
}
