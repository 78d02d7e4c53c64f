from marshmallow import Schema, fields, validate, EXCLUDE
from calorie_tracker.utils.http import valid_id

non_negative = validate.Range(min=0)


class CreatePlannedFoodSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    meal_plan_id = fields.Int(required=True, validate=valid_id)
    food_name = fields.Str(required=True, validate=validate.Length(min=1))
    quantity_grams = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    calories = fields.Float(required=True, validate=non_negative)
    protein = fields.Float(allow_none=True, load_default=0, validate=non_negative)
    carbs = fields.Float(allow_none=True, load_default=0, validate=non_negative)
    fat = fields.Float(allow_none=True, load_default=0, validate=non_negative)


class UpdatePlannedFoodSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(required=True, validate=valid_id)
    food_name = fields.Str(validate=validate.Length(min=1))
    quantity_grams = fields.Float(validate=validate.Range(min=0, min_inclusive=False))
    calories = fields.Float(validate=non_negative)
    protein = fields.Float(allow_none=True, validate=non_negative)
    carbs = fields.Float(allow_none=True, validate=non_negative)
    fat = fields.Float(allow_none=True, validate=non_negative)
