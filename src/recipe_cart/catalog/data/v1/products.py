PRODUCTS = [
    {
        "id": "onion",
        "name": "Onion",
        "category": "Vegetables",
        "price": 40,
        "unit": "kg",
        "unitQuantity": 1,
        "tags": ["vegetable", "onion", "pyaz", "kanda"],
    },
    {
        "id": "tomato",
        "name": "Tomato",
        "category": "Vegetables",
        "price": 30,
        "unit": "kg",
        "unitQuantity": 1,
        "tags": ["vegetable", "tomato", "tamatar"],
    },
    {
        "id": "amul-taaza-paneer",
        "name": "Amul Taaza Paneer",
        "category": "Dairy",
        "brand": "Amul",
        "price": 80,
        "unit": "g",
        "unitQuantity": 200,
        "tags": ["paneer", "cottage cheese", "dairy", "amul"],
    },
    {
        "id": "aashirvaad-select-atta",
        "name": "Aashirvaad Select Atta",
        "category": "Grains & Flour",
        "brand": "Aashirvaad",
        "price": 550,
        "unit": "kg",
        "unitQuantity": 5,
        "tags": ["atta", "flour", "wheat", "aashirvaad", "whole wheat flour"],
    },
    {
        "id": "tata-salt-iodized",
        "name": "Tata Salt Iodized",
        "category": "Spices & Masalas",
        "brand": "Tata",
        "price": 25,
        "unit": "kg",
        "unitQuantity": 1,
        "tags": ["salt", "tata", "iodized salt", "namak"],
    },
    {
        "id": "fortune-sunlite-sunflower-oil",
        "name": "Fortune Sunlite Refined Sunflower Oil",
        "category": "Oils & Ghee",
        "brand": "Fortune",
        "price": 130,
        "unit": "l",
        "unitQuantity": 1,
        "tags": ["oil", "sunflower oil", "refined oil", "fortune", "cooking oil"],
    },
    {
        "id": "amul-butter",
        "name": "Amul Butter",
        "category": "Dairy",
        "brand": "Amul",
        "price": 56,
        "unit": "g",
        "unitQuantity": 100,
        "tags": ["butter", "dairy", "amul"],
    },
    {
        "id": "madhur-sugar",
        "name": "Madhur Pure Sugar",
        "category": "Grains & Flour",
        "brand": "Madhur",
        "price": 60,
        "unit": "kg",
        "unitQuantity": 1,
        "tags": ["sugar", "cheeni", "madhur"],
    },
    {
        "id": "mdh-garam-masala",
        "name": "MDH Garam Masala",
        "category": "Spices & Masalas",
        "brand": "MDH",
        "price": 85,
        "unit": "g",
        "unitQuantity": 100,
        "tags": ["garam masala", "masala", "spice", "mdh"],
    },
    {
        "id": "farm-eggs",
        "name": "Farm Fresh Eggs",
        "category": "Dairy",
        "price": 84,
        "unit": "piece",
        "unitQuantity": 12,
        "tags": ["egg", "eggs"],
    },
]
