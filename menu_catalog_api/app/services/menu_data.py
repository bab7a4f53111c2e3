"""Sample menu loaded into the catalog when ``Settings.seed_menu`` is on."""

DEFAULT_MENU = [
    {
        "id": 1,
        "name": "Classic Burger",
        "description": "Beef patty with lettuce, tomato, and cheese on a sesame seed bun",
        "price": 12.99,
        "category": "entree",
        "ingredients": ["beef", "lettuce", "tomato", "cheese", "bun"],
        "available": True,
    },
    {
        "id": 2,
        "name": "Chicken Caesar Salad",
        "description": "Grilled chicken breast over romaine lettuce with parmesan and croutons",
        "price": 11.50,
        "category": "entree",
        "ingredients": ["chicken", "romaine lettuce", "parmesan cheese", "croutons", "caesar dressing"],
        "available": True,
    },
    {
        "id": 3,
        "name": "Mozzarella Sticks",
        "description": "Crispy breaded mozzarella served with marinara sauce",
        "price": 8.99,
        "category": "appetizer",
        "ingredients": ["mozzarella cheese", "breadcrumbs", "marinara sauce"],
        "available": True,
    },
    {
        "id": 4,
        "name": "Chocolate Lava Cake",
        "description": "Warm chocolate cake with molten center, served with vanilla ice cream",
        "price": 7.99,
        "category": "dessert",
        "ingredients": ["chocolate", "flour", "eggs", "butter", "vanilla ice cream"],
        "available": True,
    },
    {
        "id": 5,
        "name": "Fresh Lemonade",
        "description": "House-made lemonade with fresh lemons and mint",
        "price": 3.99,
        "category": "beverage",
        "ingredients": ["lemons", "sugar", "water", "mint"],
        "available": True,
    },
    {
        "id": 6,
        "name": "Fish and Chips",
        "description": "Beer-battered cod with seasoned fries and coleslaw",
        "price": 14.99,
        "category": "entree",
        "ingredients": ["cod", "beer batter", "potatoes", "coleslaw", "tartar sauce"],
        "available": False,
    },
]
