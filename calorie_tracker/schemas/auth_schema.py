from marshmallow import Schema, fields, validate, EXCLUDE


class SignupSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    action = fields.Str(validate=validate.Equal("signup"))
    email = fields.Email(required=True)
    password = fields.Str(required=True, validate=validate.Length(min=6))
    name = fields.Str(allow_none=True, load_default=None)


class SigninSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    action = fields.Str(validate=validate.Equal("signin"))
    email = fields.Str(required=True, validate=validate.Length(min=1))
    password = fields.Str(required=True, validate=validate.Length(min=1))


AUTH_ACTIONS = {
    "signup": SignupSchema,
    "signin": SigninSchema,
}
