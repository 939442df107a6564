# tests\core\test_domain_models.py
import pytest
from pydantic import ValidationError
from app.core.domain.models import User, UserCreate

class TestUserCreateModel:
    def test_valid_input(self):
        """Should successfully create the input with valid data."""
        data = UserCreate(name="Dave", email="dave@x.com", age=22)
        assert data.name == "Dave"
        assert data.age == 22

    def test_missing_required_fields(self):
        """Should raise ValidationError if required fields are missing."""
        with pytest.raises(ValidationError):
            UserCreate.model_validate({"name": "No Email", "age": 3})

        with pytest.raises(ValidationError):
            UserCreate.model_validate({"name": "No Age", "email": "a@b.c"})

    @pytest.mark.parametrize("age", ["22", True, 22.0, None])
    def test_age_must_be_an_integer(self, age):
        """Strict mode: no coercion from strings, booleans or floats."""
        with pytest.raises(ValidationError):
            UserCreate.model_validate({"name": "Dave", "email": "dave@x.com", "age": age})

    def test_unknown_keys_are_dropped(self):
        data = UserCreate.model_validate(
            {"name": "Dave", "email": "dave@x.com", "age": 22, "id": 99, "admin": True}
        )
        assert data.model_dump() == {"name": "Dave", "email": "dave@x.com", "age": 22}

class TestUserModel:
    def test_payload_shape(self):
        user = User(id=2, name="Bob", email="bob@example.com", age=34)
        assert user.to_payload() == {"id": 2, "name": "Bob", "email": "bob@example.com", "age": 34}

    def test_user_is_frozen(self):
        """Stored records are immutable value objects."""
        user = User(id=1, name="Alice", email="alice@example.com", age=28)
        with pytest.raises(ValidationError):
            user.name = "Mallory"
        assert user.name == "Alice"
