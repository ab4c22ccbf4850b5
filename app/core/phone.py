"""
电话号码格式校验
"""
from typing import Optional

import phonenumbers
from phonenumbers import NumberParseException
from phonenumbers.phonenumberutil import ValidationResult


def is_valid_phone_number(phone_number: str, country_code: Optional[str] = None) -> bool:
    """
    按国家/地区代码 (ISO 3166 alpha-2, 如 "US"、"IN") 校验号码格式。
    以 "+" 开头的国际格式号码可以不带地区代码。
    """
    region = country_code.strip().upper() if country_code else None
    try:
        parsed = phonenumbers.parse(phone_number, region)
    except NumberParseException:
        return False
    return phonenumbers.is_possible_number_with_reason(parsed) == ValidationResult.IS_POSSIBLE
