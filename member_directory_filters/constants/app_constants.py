class AppConstants:
    # listing args
    PROFILE_QUERY = "profile_query"
    USER_ID = "user_id"
    PER_PAGE = "per_page"
    DYNAMO_ITEMS = "Items"
    NEXT_TOKEN = "NextToken"

    # filter params
    SKILLS = "skills"
    LOCATION = "location"
    INTERESTS = "interests"
    ARRAY_PARAM_SUFFIX = "[]"
    TERM_SEPARATOR = ","
    DISPLAY_SEPARATOR = ", "

    # query structure
    RELATION = "relation"
    GROUPS = "groups"
    CLAUSES = "clauses"
    FIELD = "field"
    VALUE = "value"
    COMPARE = "compare"
    TYPE = "type"

    # ui
    FIELDSET_ID = "mdf-filters"
    APPLY_BUTTON_ID = "mdf-apply"
    RESET_BUTTON_ID = "mdf-reset"
