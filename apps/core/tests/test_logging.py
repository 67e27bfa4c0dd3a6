"""
Tests for structured logging, PII masking and log sanitization.
"""
import json
import logging

from apps.core.logging import PIIMasker, JSONFormatter
from apps.core.log_sanitizer import SanitizingFormatter, SanitizingFilter
from apps.core.middleware import LoggingFilter


def _record(msg, *args, **extra):
    record = logging.LogRecord('apps.test', logging.INFO, __file__, 10, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestPIIMasker:

    def test_mask_email(self):
        masked = PIIMasker.mask_email('Contact jane@example.com now')

        assert 'j***@example.com' in masked
        assert 'jane@example.com' not in masked

    def test_mask_phone(self):
        masked = PIIMasker.mask_phone('Call +254712345678')

        assert '+25' in masked
        assert '+254712345678' not in masked

    def test_mask_secrets(self):
        masked = PIIMasker.mask_secrets('password="hunter2" token=abc.def')

        assert 'hunter2' not in masked
        assert 'abc.def' not in masked

    def test_mask_dict(self):
        data = {
            'password': 'hunter2',
            'email': 'jane@example.com',
            'role': 'Manager',
            'nested': {'token': 'abc'},
            'quantity': 12,
        }

        masked = PIIMasker.mask_dict(data)

        assert masked['password'] == '********'
        assert masked['email'] == 'j***@example.com'
        assert masked['role'] == 'Manager'
        assert masked['nested']['token'] == '********'
        assert masked['quantity'] == 12


class TestJSONFormatter:

    def test_structured_output(self):
        record = _record('Flock created', request_id='req-1', flock_id='abc')

        data = json.loads(JSONFormatter().format(record))

        assert data['level'] == 'INFO'
        assert data['logger'] == 'apps.test'
        assert data['message'] == 'Flock created'
        assert data['request_id'] == 'req-1'
        assert data['flock_id'] == 'abc'

    def test_masks_extras(self):
        record = _record('User registered', user_email='jane@example.com')

        data = json.loads(JSONFormatter().format(record))

        assert data['user_email'] == 'j***@example.com'

    def test_unserializable_extra(self):
        record = _record('Odd value', thing=object())

        data = json.loads(JSONFormatter().format(record))

        assert data['thing'].startswith('<object object')


class TestSanitizer:

    def test_redacts_bearer_token(self):
        text = SanitizingFormatter.sanitize('Authorization header Bearer abcdefghijklmnopqrstuvwxyz123')

        assert 'abcdefghijklmnopqrstuvwxyz123' not in text

    def test_redacts_database_password(self):
        text = SanitizingFormatter.sanitize('postgres://farm:s3cret@db:5432/farm')

        assert text == 'postgres://farm:[REDACTED]@db:5432/farm'

    def test_filter_sanitizes_args(self):
        record = _record('Login with %s', 'password=hunter2')

        assert SanitizingFilter().filter(record) is True
        assert 'hunter2' not in record.getMessage()


class TestRequestIdFilter:

    def test_keeps_explicit_request_id(self):
        record = _record('Hello', request_id='req-9')

        LoggingFilter().filter(record)

        assert record.request_id == 'req-9'

    def test_outside_request(self):
        record = _record('Hello')

        LoggingFilter().filter(record)

        assert record.request_id is None


class TestSecretKeyPattern:

    def test_redacts_assigned_secret_key(self):
        text = SanitizingFormatter.sanitize('SECRET_KEY=abc123xyz')

        assert 'abc123xyz' not in text

    def test_leaves_setting_name_in_prose(self):
        message = 'JWT_SECRET_KEY is not set; token issuance will fail.'

        assert SanitizingFormatter.sanitize(message) == message
