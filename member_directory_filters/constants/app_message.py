class AppMessage:
    DUPLICATE_FIELD = "filter field already registered"
    INVALID_FIELD_SPEC = "filter field must be written as param=Attribute"
    EMPTY_FIELD_SPEC = "filter field param and attribute must not be empty"
    INVALID_PAGE_SIZE = "page size must be a positive integer"
    ENGINE_UNAVAILABLE = "members listing engine not available, filters disabled"
    FILTERS_INSTALLED = "member directory filters installed"
    AUGMENTER_FAILED = "query augmenter failed, skipping"
    FILTER_LEGEND = "Filter Members"
    APPLY = "Apply"
    RESET = "Reset"
