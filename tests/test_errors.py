import pytest

from product_scraper.core.errors import (
    ExtractionError,
    RequestError,
    StatusCodeError,
    check_error,
    error_category,
    intercept,
)


def test_check_error_rewrites_matching_category():
    err = RequestError('getaddrinfo ENOTFOUND shop.test', url='http://shop.test')

    with pytest.raises(RequestError) as exc_info:
        check_error(err, 'RequestError', 'Cannot connect with http://shop.test')

    assert exc_info.value is err
    assert err.message == 'Cannot connect with http://shop.test'
    assert str(err) == 'Cannot connect with http://shop.test'


def test_check_error_leaves_other_categories():
    err = StatusCodeError('404 - Not Found', status_code=404)

    with pytest.raises(StatusCodeError) as exc_info:
        check_error(err, 'RequestError', 'Cannot connect')

    assert exc_info.value.message == '404 - Not Found'


def test_check_error_on_builtin_uses_class_name():
    err = ValueError('bad')

    with pytest.raises(ValueError, match='replaced'):
        check_error(err, 'ValueError', 'replaced')


def test_intercept_rewrites_and_reraises():
    with pytest.raises(RequestError, match='^Cannot connect with x$'):
        with intercept('RequestError', 'Cannot connect with x'):
            raise RequestError('connection refused')


def test_intercept_passes_other_errors_through():
    with pytest.raises(ExtractionError, match='missing'):
        with intercept('RequestError', 'Cannot connect'):
            raise ExtractionError('missing')


def test_intercept_without_error():
    with intercept('RequestError', 'Cannot connect'):
        value = 1
    assert value == 1


def test_error_category():
    assert error_category(RequestError('x')) == 'RequestError'
    assert error_category(StatusCodeError('x')) == 'StatusCodeError'
    assert error_category(OSError('x')) == 'OSError'
