"""Static tables: table names, status codes, cache keys, TTLs, messages."""
from __future__ import annotations

TABLES = {
    "USERS": "users",
    "ADMINS": "admins",
    "SUBSCRIPTION": "subscription",
    "CAREERS": "careers",
    "BLOGS": "blogs",
    "CONTACT_US": "contact_us",
    "FRANCHISE_INQUIRIES": "franchise_inquiries",
    "USER_LOGINS": "user_logins",
    "PAYMENTS": "payments",
    "OPERATION_LOG": "operation_log",
}

STATUS = {
    "USER": {"ACTIVE": 1, "INACTIVE": 2, "SUSPENDED": 3},
    "ADMIN": {"ACTIVE": 1, "INACTIVE": 2},
    "CAREER": {"ACTIVE": 1, "INACTIVE": 2, "DRAFT": 3},
    "BLOG": {"PUBLISHED": 1, "DRAFT": 2, "ARCHIVED": 3},
    "FRANCHISE": {"NEW": 1, "CONTACTED": 2, "IN_DISCUSSION": 3, "APPROVED": 4, "REJECTED": 5},
    "SUBSCRIPTION": {"ACTIVE": "active", "PAUSED": "paused", "CANCELLED": "cancelled", "EXPIRED": "expired"},
    "PAYMENT": {
        "PENDING": "pending",
        "SUCCESS": "success",
        "FAILED": "failed",
        "CANCELLED": "cancelled",
        "REFUNDED": "refunded",
    },
    "PAYMENT_STATUS": {"PENDING": "pending", "PAID": "paid", "FAILED": "failed"},
    "LOGIN": {"SUCCESS": "success", "FAILED": "failed", "BLOCKED": "blocked"},
}

JOB_TYPES = ("Full-time", "Part-time", "Contract", "Internship")
EXPERIENCE_LEVELS = ("Entry", "Mid", "Senior", "Executive")
PAYMENT_METHODS = ("card", "upi", "netbanking", "wallet", "emi")
PAYMENT_GATEWAYS = ("razorpay", "stripe", "payu", "cashfree")
DISCOUNT_TYPES = ("percentage", "fixed", "trial")
GENDERS = ("male", "female", "other")

# module key -> cache base key
CACHE_KEYS = {
    "USERS_LIST": "users_list",
    "ADMINS_LIST": "admins_list",
    "SUBSCRIPTIONS_LIST": "subscriptions_list",
    "CAREERS_LIST": "careers_list",
    "BLOGS_LIST": "blogs_list",
    "CONTACT_LIST": "contact_list",
    "FRANCHISE_LIST": "franchise_list",
    "USER_LOGINS_LIST": "user_logins_list",
    "PAYMENTS_LIST": "payments_list",
}

PAGINATION = {
    "DEFAULT_PAGE": 1,
    "DEFAULT_LIMIT": 10,
    "MAX_LIMIT": 100,
}

CACHE_TTL = {
    "SHORT": 300,
    "MEDIUM": 1800,
    "LONG": 3600,
}

SIGN_IN_STATUS_MESSAGE = {
    "SUCCESS": "Login successful",
    "INCORRECT_PASSWORD": "Incorrect password. Please try again.",
    "INACTIVE_BY_ADMIN": "Account is inactive. Contact administrator.",
    "EMAIL_NOT_FOUND": "Email does not exist.",
}

ERROR_MESSAGES = {
    "INVALID_CREDENTIALS": "Invalid email or password",
    "ACCESS_DENIED": "Access denied",
    "AUTH_REQUIRED": "Admin token required",
    "RESOURCE_NOT_FOUND": "Resource not found",
    "VALIDATION_ERROR": "Validation error",
    "SERVER_ERROR": "Internal server error",
    "EMAIL_ALREADY_EXISTS": "Email already exists",
    "USER_NOT_FOUND": "User not found",
    "ADMIN_NOT_FOUND": "Admin not found",
    "USER_ID_REQUIRED": "User id required",
    "ADMIN_ID_REQUIRED": "Admin id required",
    "NO_FIELDS_TO_UPDATE": "No fields to update",
}

SUCCESS_MESSAGES = {
    "CREATED": "Resource created successfully",
    "UPDATED": "Resource updated successfully",
    "DELETED": "Resource deleted successfully",
    "FETCHED": "Data fetched successfully",
    "EXPORT_READY": "Data ready for export",
    "CACHE_CLEARED": "Cache cleared successfully",
    "USER_REGISTERED": "User registered successfully",
    "LOGIN_SUCCESSFUL": "Login successful",
    "SUBSCRIPTION_CREATED": "Subscription created successfully",
    "PROFILE_UPDATED": "Profile updated successfully",
    "PASSWORD_CHANGED": "Password changed successfully",
}
