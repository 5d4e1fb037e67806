# Number of related orders embedded in list responses
RECENT_ORDERS_LIMIT = 5
