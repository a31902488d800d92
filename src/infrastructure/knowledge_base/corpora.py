"""
Static reference corpora indexed at startup.

COMPANY_PROFILES holds fictional company profiles for the company-info search;
FINANCIAL_GLOSSARY holds one entry per financial term for definition lookups.
"""

COMPANY_PROFILES = [
    """
    # TechVision Inc. (TVIX)

    Industry: Technology
    Founded: 2005
    Headquarters: San Francisco, CA

    TechVision is a leading AI and machine learning company specializing in computer
    vision solutions. Their flagship product, VisionCore, is used by major automotive
    manufacturers for autonomous driving systems.

    Recent developments:
    - Announced partnership with AutoDrive to enhance autonomous vehicle safety features
    - Introduced new AI chip with 40% better performance than previous generation
    - Expanding into healthcare imaging with acquisition of MedSight Technologies

    Financial highlights:
    - Annual revenue: $3.2B (up 18% YoY)
    - Profit margin: 22%
    - R&D spending: $780M (24% of revenue)
    """,
    """
    # GreenEnergy Corp (GRNE)

    Industry: Renewable Energy
    Founded: 2010
    Headquarters: Austin, TX

    GreenEnergy specializes in solar and wind energy solutions with a focus on energy
    storage technology. Their battery systems are used in both residential and
    commercial applications.

    Recent developments:
    - Launched next-generation home battery with 30% increased capacity
    - Secured $500M contract to build solar farm in Nevada
    - Expanding manufacturing facilities in Texas and Arizona

    Financial highlights:
    - Annual revenue: $1.8B (up 25% YoY)
    - Profit margin: 14%
    - Net cash position: $620M
    """,
    """
    # HealthPlus Inc. (HLTH)

    Industry: Healthcare
    Founded: 1998
    Headquarters: Boston, MA

    HealthPlus develops innovative medical devices and digital health platforms. Their
    diabetes management system has captured significant market share in the US.

    Recent developments:
    - FDA approval for next-generation continuous glucose monitor
    - Expanded telemedicine platform to include mental health services
    - Strategic partnership with major insurance providers

    Financial highlights:
    - Annual revenue: $2.4B (up 12% YoY)
    - Profit margin: 18%
    - International sales: 35% of revenue
    """,
    """
    # DigitalFinance Group (DFG)

    Industry: Fintech
    Founded: 2015
    Headquarters: New York, NY

    DigitalFinance provides blockchain-based payment solutions and digital banking
    services to both consumers and businesses.

    Recent developments:
    - Launched small business lending platform with AI-powered risk assessment
    - Obtained banking license in European Union
    - Integrated with major e-commerce platforms

    Financial highlights:
    - Annual revenue: $950M (up 40% YoY)
    - Profit margin: 8%
    - User base: 12 million (up 30% YoY)
    """,
    """
    # ConsumerBrands Corp (CNBC)

    Industry: Consumer Goods
    Founded: 1975
    Headquarters: Chicago, IL

    ConsumerBrands manages a portfolio of household products, personal care items, and
    food brands with strong presence in North America and Europe.

    Recent developments:
    - Sustainability initiative to make all packaging recyclable by 2026
    - Expansion into Asian markets
    - Divested underperforming snack food division

    Financial highlights:
    - Annual revenue: $8.5B (up 5% YoY)
    - Profit margin: 15%
    - Dividend yield: 3.2%
    """,
]

FINANCIAL_GLOSSARY = [
    "Bull Market: A period in which the prices of securities are rising or expected to "
    "rise, commonly defined as a gain of 20% or more from recent lows, accompanied by "
    "investor optimism and a strong economy.",
    "Bear Market: A period in which the prices of securities fall 20% or more from recent "
    "highs amid widespread pessimism and negative investor sentiment.",
    "Price-to-Earnings Ratio (P/E): A valuation ratio equal to a company's share price "
    "divided by its earnings per share. A high P/E can signal expected growth or "
    "overvaluation.",
    "Market Capitalization: The total market value of a company's outstanding shares, "
    "calculated as the share price multiplied by the number of shares outstanding.",
    "Dividend Yield: The annual dividend per share divided by the share price, expressed "
    "as a percentage. It shows how much cash flow an investor receives for each dollar "
    "invested.",
    "Exchange-Traded Fund (ETF): A pooled investment fund that holds a basket of assets "
    "and trades on an exchange like a single stock throughout the trading day.",
    "Short Selling: Borrowing shares and selling them in the expectation of buying them "
    "back later at a lower price. Losses are theoretically unlimited if the price rises.",
    "Volatility: A statistical measure of how widely the returns of a security or index "
    "are dispersed, often measured by standard deviation. Higher volatility means larger "
    "price swings.",
    "Earnings Per Share (EPS): A company's net profit divided by its number of common "
    "shares outstanding; a key indicator of profitability.",
    "Blue-Chip Stock: Shares of a large, well-established and financially sound company "
    "with a history of reliable performance.",
    "Liquidity: How quickly an asset can be bought or sold at a price close to its "
    "market value without significantly moving that price.",
    "Diversification: Spreading investments across different assets, sectors or regions "
    "to reduce exposure to any single source of risk.",
]
