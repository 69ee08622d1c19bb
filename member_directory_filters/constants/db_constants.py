class DBConstants:

    # fields
    USER_ID = 'user_id'
