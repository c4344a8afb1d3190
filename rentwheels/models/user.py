"""
User
---------------------------
"""

from tortoise import Model, fields


class User(Model):
    """
    Represents a registered profile, keyed by email.
    """

    id = fields.IntField(pk=True)
    email = fields.CharField(max_length=255, unique=True)
    name = fields.CharField(max_length=255, null=True)
    photo_url = fields.CharField(max_length=1024, null=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "users"

    def serialize(self):
        data = {
            "id": self.id,
            "email": self.email,
            "created_at": self.created_at,
        }

        if self.name is not None:
            data["name"] = self.name
        if self.photo_url is not None:
            data["photo_url"] = self.photo_url

        return data

    def __str__(self):
        return f"[{self.id}] {self.email}"
