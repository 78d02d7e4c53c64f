from marshmallow import Schema, fields, validate, EXCLUDE
from calorie_tracker.utils.http import valid_id

non_negative = validate.Range(min=0)


class CustomFoodSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    food_name = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    calories_per_100g = fields.Float(required=True, validate=non_negative)
    protein_per_100g = fields.Float(allow_none=True, load_default=0, validate=non_negative)
    carbs_per_100g = fields.Float(allow_none=True, load_default=0, validate=non_negative)
    fat_per_100g = fields.Float(allow_none=True, load_default=0, validate=non_negative)
    brand = fields.Str(allow_none=True, load_default=None)


class UpdateCustomFoodSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(required=True, validate=valid_id)
    food_name = fields.Str(validate=validate.Length(min=1, max=200))
    calories_per_100g = fields.Float(validate=non_negative)
    protein_per_100g = fields.Float(allow_none=True, validate=non_negative)
    carbs_per_100g = fields.Float(allow_none=True, validate=non_negative)
    fat_per_100g = fields.Float(allow_none=True, validate=non_negative)
    brand = fields.Str(allow_none=True)
