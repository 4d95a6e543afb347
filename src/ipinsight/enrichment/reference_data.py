"""
Static reference tables used to enrich raw location records
All tables are read-only and built once at import time
"""

from types import MappingProxyType

UNKNOWN = 'Unknown'
UNKNOWN_COUNTRY_CODE = 'XX'
UNKNOWN_ISO3 = 'XXX'
UNKNOWN_REGION_CODE = 'XX'
UNKNOWN_CONTINENT = 'XX'
DEFAULT_TLD = '.com'
DEFAULT_POSTAL = '000000'
DEFAULT_UTC_OFFSET = '+0000'
DEFAULT_CALLING_CODE = '+000'
DEFAULT_CURRENCY = 'USD'
DEFAULT_CURRENCY_NAME = 'US Dollar'
DEFAULT_LANGUAGES = 'en'
DEFAULT_TIMEZONE = 'UTC'
PLACEHOLDER_ASN = 'AS0000'
PLACEHOLDER_NETWORK_V4 = '0.0.0.0/0'
PLACEHOLDER_NETWORK_V6 = '::/0'

# Country name (localized and English spellings) -> ISO 3166-1 alpha-2
COUNTRY_CODES = MappingProxyType({
    '中国': 'CN', 'China': 'CN', "People's Republic of China": 'CN',
    '美国': 'US', 'United States': 'US', 'United States of America': 'US', 'USA': 'US',
    '日本': 'JP', 'Japan': 'JP',
    '英国': 'GB', 'United Kingdom': 'GB', 'Great Britain': 'GB', 'UK': 'GB',
    '德国': 'DE', 'Germany': 'DE',
    '法国': 'FR', 'France': 'FR',
    '加拿大': 'CA', 'Canada': 'CA',
    '澳大利亚': 'AU', 'Australia': 'AU',
    '韩国': 'KR', 'South Korea': 'KR', 'Korea': 'KR', 'Republic of Korea': 'KR',
    '印度': 'IN', 'India': 'IN',
    '俄罗斯': 'RU', 'Russia': 'RU', 'Russian Federation': 'RU',
    '巴西': 'BR', 'Brazil': 'BR',
    '意大利': 'IT', 'Italy': 'IT',
    '西班牙': 'ES', 'Spain': 'ES',
    '荷兰': 'NL', 'Netherlands': 'NL', 'The Netherlands': 'NL',
    '瑞典': 'SE', 'Sweden': 'SE',
    '挪威': 'NO', 'Norway': 'NO',
    '丹麦': 'DK', 'Denmark': 'DK',
    '芬兰': 'FI', 'Finland': 'FI',
    '新西兰': 'NZ', 'New Zealand': 'NZ',
    '新加坡': 'SG', 'Singapore': 'SG',
    '中国香港': 'HK', '香港': 'HK', 'Hong Kong': 'HK',
    '以色列': 'IL', 'Israel': 'IL',
    '阿联酋': 'AE', '阿拉伯联合酋长国': 'AE', 'United Arab Emirates': 'AE', 'UAE': 'AE',
    '瑞士': 'CH', 'Switzerland': 'CH',
    '奥地利': 'AT', 'Austria': 'AT',
    '比利时': 'BE', 'Belgium': 'BE',
    '卢森堡': 'LU', 'Luxembourg': 'LU',
    '爱尔兰': 'IE', 'Ireland': 'IE',
    '波兰': 'PL', 'Poland': 'PL',
    '葡萄牙': 'PT', 'Portugal': 'PT',
    '墨西哥': 'MX', 'Mexico': 'MX',
    '阿根廷': 'AR', 'Argentina': 'AR',
    '南非': 'ZA', 'South Africa': 'ZA',
})

ISO3_CODES = MappingProxyType({
    'CN': 'CHN', 'US': 'USA', 'JP': 'JPN', 'GB': 'GBR', 'DE': 'DEU', 'FR': 'FRA',
    'CA': 'CAN', 'AU': 'AUS', 'KR': 'KOR', 'IN': 'IND', 'RU': 'RUS', 'BR': 'BRA',
    'IT': 'ITA', 'ES': 'ESP', 'NL': 'NLD', 'SE': 'SWE', 'NO': 'NOR', 'DK': 'DNK',
    'FI': 'FIN', 'NZ': 'NZL', 'SG': 'SGP', 'HK': 'HKG', 'IL': 'ISR', 'AE': 'ARE',
    'CH': 'CHE', 'AT': 'AUT', 'BE': 'BEL', 'LU': 'LUX', 'IE': 'IRL', 'PL': 'POL',
    'PT': 'PRT', 'MX': 'MEX', 'AR': 'ARG', 'ZA': 'ZAF',
})

CAPITALS = MappingProxyType({
    'CN': 'Beijing', 'US': 'Washington', 'JP': 'Tokyo', 'GB': 'London',
    'DE': 'Berlin', 'FR': 'Paris', 'CA': 'Ottawa', 'AU': 'Canberra',
    'KR': 'Seoul', 'IN': 'New Delhi', 'RU': 'Moscow', 'BR': 'Brasilia',
    'IT': 'Rome', 'ES': 'Madrid', 'NL': 'Amsterdam', 'SE': 'Stockholm',
    'NO': 'Oslo', 'DK': 'Copenhagen', 'FI': 'Helsinki', 'NZ': 'Wellington',
    'SG': 'Singapore', 'HK': 'Hong Kong', 'IL': 'Jerusalem', 'AE': 'Abu Dhabi',
    'CH': 'Bern', 'AT': 'Vienna', 'BE': 'Brussels', 'LU': 'Luxembourg',
    'IE': 'Dublin', 'PL': 'Warsaw', 'PT': 'Lisbon', 'MX': 'Mexico City',
    'AR': 'Buenos Aires', 'ZA': 'Pretoria',
})

# Country-code TLDs that differ from the lower-cased ISO code
TLD_OVERRIDES = MappingProxyType({
    'GB': '.uk',
})

CONTINENTS = MappingProxyType({
    'CN': 'AS', 'JP': 'AS', 'KR': 'AS', 'IN': 'AS', 'SG': 'AS', 'HK': 'AS',
    'IL': 'AS', 'AE': 'AS',
    'US': 'NA', 'CA': 'NA', 'MX': 'NA',
    'GB': 'EU', 'DE': 'EU', 'FR': 'EU', 'RU': 'EU', 'IT': 'EU', 'ES': 'EU',
    'NL': 'EU', 'SE': 'EU', 'NO': 'EU', 'DK': 'EU', 'FI': 'EU', 'CH': 'EU',
    'AT': 'EU', 'BE': 'EU', 'LU': 'EU', 'IE': 'EU', 'PL': 'EU', 'PT': 'EU',
    'AU': 'OC', 'NZ': 'OC',
    'BR': 'SA', 'AR': 'SA',
    'ZA': 'AF',
})

# Current European Union member states
EU_MEMBERS = frozenset({
    'AT', 'BE', 'BG', 'HR', 'CY', 'CZ', 'DK', 'EE', 'FI', 'FR', 'DE', 'GR',
    'HU', 'IE', 'IT', 'LV', 'LT', 'LU', 'MT', 'NL', 'PL', 'PT', 'RO', 'SK',
    'SI', 'ES', 'SE',
})

CALLING_CODES = MappingProxyType({
    'CN': '+86', 'US': '+1', 'JP': '+81', 'GB': '+44', 'DE': '+49', 'FR': '+33',
    'CA': '+1', 'AU': '+61', 'KR': '+82', 'IN': '+91', 'RU': '+7', 'BR': '+55',
    'IT': '+39', 'ES': '+34', 'NL': '+31', 'SE': '+46', 'NO': '+47', 'DK': '+45',
    'FI': '+358', 'NZ': '+64', 'SG': '+65', 'HK': '+852', 'IL': '+972', 'AE': '+971',
    'CH': '+41', 'AT': '+43', 'BE': '+32', 'LU': '+352', 'IE': '+353', 'PL': '+48',
    'PT': '+351', 'MX': '+52', 'AR': '+54', 'ZA': '+27',
})

CURRENCIES = MappingProxyType({
    'CN': 'CNY', 'US': 'USD', 'JP': 'JPY', 'GB': 'GBP', 'DE': 'EUR', 'FR': 'EUR',
    'CA': 'CAD', 'AU': 'AUD', 'KR': 'KRW', 'IN': 'INR', 'RU': 'RUB', 'BR': 'BRL',
    'IT': 'EUR', 'ES': 'EUR', 'NL': 'EUR', 'SE': 'SEK', 'NO': 'NOK', 'DK': 'DKK',
    'FI': 'EUR', 'NZ': 'NZD', 'SG': 'SGD', 'HK': 'HKD', 'IL': 'ILS', 'AE': 'AED',
    'CH': 'CHF', 'AT': 'EUR', 'BE': 'EUR', 'LU': 'EUR', 'IE': 'EUR', 'PL': 'PLN',
    'PT': 'EUR', 'MX': 'MXN', 'AR': 'ARS', 'ZA': 'ZAR',
})

CURRENCY_NAMES = MappingProxyType({
    'CNY': 'Renminbi', 'USD': 'US Dollar', 'JPY': 'Japanese Yen',
    'GBP': 'Pound Sterling', 'EUR': 'Euro', 'CAD': 'Canadian Dollar',
    'AUD': 'Australian Dollar', 'KRW': 'South Korean Won', 'INR': 'Indian Rupee',
    'RUB': 'Russian Ruble', 'BRL': 'Brazilian Real', 'SEK': 'Swedish Krona',
    'NOK': 'Norwegian Krone', 'DKK': 'Danish Krone', 'NZD': 'New Zealand Dollar',
    'SGD': 'Singapore Dollar', 'HKD': 'Hong Kong Dollar', 'ILS': 'Israeli New Shekel',
    'AED': 'UAE Dirham', 'CHF': 'Swiss Franc', 'PLN': 'Polish Zloty',
    'MXN': 'Mexican Peso', 'ARS': 'Argentine Peso', 'ZAR': 'South African Rand',
})

LANGUAGES = MappingProxyType({
    'CN': 'zh-CN,en', 'US': 'en-US,es', 'JP': 'ja,en', 'GB': 'en-GB',
    'DE': 'de,en', 'FR': 'fr,en', 'CA': 'en-CA,fr-CA', 'AU': 'en-AU',
    'KR': 'ko,en', 'IN': 'hi,en', 'RU': 'ru,en', 'BR': 'pt-BR,en',
    'IT': 'it,en', 'ES': 'es,ca,gl,eu', 'NL': 'nl,fy', 'SE': 'sv,fi',
    'NO': 'no,nb,nn', 'DK': 'da,en', 'FI': 'fi,sv', 'NZ': 'en-NZ,mi',
    'SG': 'en-SG,zh-SG,ms,ta', 'HK': 'zh-HK,en', 'IL': 'he,ar,en', 'AE': 'ar,en',
    'CH': 'de-CH,fr-CH,it-CH', 'AT': 'de-AT', 'BE': 'nl-BE,fr-BE,de-BE',
    'LU': 'lb,de,fr', 'IE': 'en-IE,ga', 'PL': 'pl', 'PT': 'pt-PT', 'MX': 'es-MX',
    'AR': 'es-AR,en', 'ZA': 'en-ZA,af,zu,xh',
})

# Square kilometres
COUNTRY_AREAS = MappingProxyType({
    'CN': 9596961.0, 'US': 9833517.0, 'JP': 377975.0, 'GB': 242495.0,
    'DE': 357114.0, 'FR': 643801.0, 'CA': 9984670.0, 'AU': 7692024.0,
    'KR': 100210.0, 'IN': 3287263.0, 'RU': 17098246.0, 'BR': 8515767.0,
    'IT': 301340.0, 'ES': 505990.0, 'NL': 41850.0, 'SE': 450295.0,
    'NO': 385207.0, 'DK': 43094.0, 'FI': 338424.0, 'NZ': 268021.0,
    'SG': 728.0, 'HK': 1104.0, 'IL': 20770.0, 'AE': 83600.0,
    'CH': 41285.0, 'AT': 83879.0, 'BE': 30528.0, 'LU': 2586.0,
    'IE': 70273.0, 'PL': 312696.0, 'PT': 92212.0, 'MX': 1964375.0,
    'AR': 2780400.0, 'ZA': 1221037.0,
})

COUNTRY_POPULATIONS = MappingProxyType({
    'CN': 1439323776, 'US': 331002651, 'JP': 126476461, 'GB': 67886011,
    'DE': 83783942, 'FR': 65273511, 'CA': 37742154, 'AU': 25499884,
    'KR': 51269185, 'IN': 1380004385, 'RU': 145934462, 'BR': 212559417,
    'IT': 60461826, 'ES': 46754778, 'NL': 17134872, 'SE': 10099265,
    'NO': 5421241, 'DK': 5792202, 'FI': 5540720, 'NZ': 4822233,
    'SG': 5850342, 'HK': 7496981, 'IL': 8655535, 'AE': 9890402,
    'CH': 8654622, 'AT': 9006398, 'BE': 11589623, 'LU': 625978,
    'IE': 4937786, 'PL': 37846611, 'PT': 10196709, 'MX': 128932753,
    'AR': 45195774, 'ZA': 59308690,
})

# (country code) -> region name -> region code
REGION_CODES = MappingProxyType({
    'CN': MappingProxyType({
        '北京': 'BJ', '北京市': 'BJ', 'Beijing': 'BJ',
        '上海': 'SH', '上海市': 'SH', 'Shanghai': 'SH',
        '天津': 'TJ', '天津市': 'TJ', 'Tianjin': 'TJ',
        '重庆': 'CQ', '重庆市': 'CQ', 'Chongqing': 'CQ',
        '广东': 'GD', '广东省': 'GD', 'Guangdong': 'GD',
        '浙江': 'ZJ', '浙江省': 'ZJ', 'Zhejiang': 'ZJ',
        '江苏': 'JS', '江苏省': 'JS', 'Jiangsu': 'JS',
        '四川': 'SC', '四川省': 'SC', 'Sichuan': 'SC',
        '湖北': 'HB', '湖北省': 'HB', 'Hubei': 'HB',
        '福建': 'FJ', '福建省': 'FJ', 'Fujian': 'FJ',
    }),
    'US': MappingProxyType({
        'California': 'CA', 'New York': 'NY', 'Texas': 'TX', 'Florida': 'FL',
        'Illinois': 'IL', 'Washington': 'WA', 'Virginia': 'VA',
        'Massachusetts': 'MA', 'New Jersey': 'NJ', 'Georgia': 'GA',
        'Oregon': 'OR', 'Pennsylvania': 'PA', 'Ohio': 'OH',
    }),
})

POSTAL_CODES = MappingProxyType({
    '北京': '100000', 'Beijing': '100000',
    '上海': '200000', 'Shanghai': '200000',
    '广州': '510000', 'Guangzhou': '510000',
    '深圳': '518000', 'Shenzhen': '518000',
    '杭州': '310000', 'Hangzhou': '310000',
    'New York': '10001', 'Los Angeles': '90001', 'San Francisco': '94102',
    'Seattle': '98101', 'Chicago': '60601',
    'Tokyo': '100-0001', 'London': 'EC1A', 'Paris': '75001', 'Berlin': '10115',
})

# Standard (non-DST) offsets
UTC_OFFSETS = MappingProxyType({
    'UTC': '+0000', 'Etc/UTC': '+0000', 'GMT': '+0000',
    'Asia/Shanghai': '+0800', 'Asia/Beijing': '+0800', 'Asia/Chongqing': '+0800',
    'Asia/Hong_Kong': '+0800', 'Asia/Singapore': '+0800', 'Asia/Taipei': '+0800',
    'Asia/Tokyo': '+0900', 'Asia/Seoul': '+0900',
    'Asia/Kolkata': '+0530', 'Asia/Dubai': '+0400', 'Asia/Jerusalem': '+0200',
    'Europe/London': '+0000', 'Europe/Dublin': '+0000', 'Europe/Lisbon': '+0000',
    'Europe/Paris': '+0100', 'Europe/Berlin': '+0100', 'Europe/Madrid': '+0100',
    'Europe/Rome': '+0100', 'Europe/Amsterdam': '+0100', 'Europe/Brussels': '+0100',
    'Europe/Vienna': '+0100', 'Europe/Zurich': '+0100', 'Europe/Stockholm': '+0100',
    'Europe/Oslo': '+0100', 'Europe/Copenhagen': '+0100', 'Europe/Warsaw': '+0100',
    'Europe/Luxembourg': '+0100', 'Europe/Helsinki': '+0200', 'Europe/Moscow': '+0300',
    'Africa/Johannesburg': '+0200',
    'America/New_York': '-0500', 'America/Toronto': '-0500',
    'America/Chicago': '-0600', 'America/Mexico_City': '-0600',
    'America/Denver': '-0700', 'America/Phoenix': '-0700',
    'America/Los_Angeles': '-0800', 'America/Vancouver': '-0800',
    'America/Sao_Paulo': '-0300', 'America/Argentina/Buenos_Aires': '-0300',
    'Australia/Sydney': '+1000', 'Australia/Melbourne': '+1000',
    'Australia/Perth': '+0800', 'Pacific/Auckland': '+1200',
})
