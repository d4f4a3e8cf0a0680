LONG_SUGGESTION = "Add a pricing page with clear tiers and a free trial. " * 10
