"""
Per-product schema descriptors.

Each descriptor carries the required fields in reporting order, the partner
key each field maps to, conditional requirements, the partner key used for
the current-address zip code and the credential prefixes tried in order.
"""

from assurerates.models.schemas import FieldKind, FieldSpec, ProductSchema

NUMERIC = FieldKind.NUMERIC

# Contact fields are required for every product and reported after the
# product-specific ones
CONTACT_FIELDS = (
    FieldSpec('email', 'email'),
    FieldSpec('firstName', 'first_name'),
    FieldSpec('lastName', 'last_name'),
    FieldSpec('address', 'address'),
    FieldSpec('city', 'city'),
    FieldSpec('addressState', 'state'),
    FieldSpec('phoneNumber', 'phone'),
)

SECOND_MORTGAGE_DECLARED = ('secondMortgage', 'yes')

REFINANCE = ProductSchema(
    product='refinance',
    endpoint='/api/submit-refinance',
    fields=(
        FieldSpec('productType', 'PRODUCT'),
        FieldSpec('zipCode', 'PROP_ZIP', exact_length=5),
        FieldSpec('propertyType', 'PROP_DESC'),
        FieldSpec('propertyPurpose', 'PROP_PURP'),
        FieldSpec('creditGrade', 'CRED_GRADE'),
        FieldSpec('estimatedHomeValue', 'EST_VAL', NUMERIC),
        FieldSpec('mortgageBalance', 'BAL_ONE', NUMERIC),
        FieldSpec('firstMortgageInterest', 'MTG_ONE_INT', NUMERIC),
        FieldSpec('secondMortgage', 'MTG_TWO'),
        FieldSpec('secondMortgageBalance', 'BAL_TWO', NUMERIC,
                  required_when=SECOND_MORTGAGE_DECLARED),
        FieldSpec('secondMortgageInterest', 'MTG_TWO_INT', NUMERIC,
                  required_when=SECOND_MORTGAGE_DECLARED),
        FieldSpec('additionalCash', 'ADD_CASH', NUMERIC),
        FieldSpec('loanType', 'LOAN_TYPE'),
        FieldSpec('bankruptcyOrForeclosure', 'FHA_BANK_FORECLOSURE'),
        FieldSpec('currentlyEmployed', 'ANNUAL_VERIFIABLE_INCOME'),
        FieldSpec('lateMortgagePayments', 'NUM_MORTGAGE_LATES'),
        FieldSpec('veteranStatus', 'VA_STATUS'),
    ) + CONTACT_FIELDS,
    address_zip_key='zip_code',
    # Refinance campaigns fall back to the purchase credentials
    credential_prefixes=('REFINANCE', 'BUY_HOME'),
)

BUY_HOME = ProductSchema(
    product='buy_home',
    endpoint='/api/submit-buy-home',
    fields=(
        FieldSpec('productType', 'PRODUCT'),
        FieldSpec('state', 'PROP_ST'),
        FieldSpec('propertyZipCode', 'PROP_ZIP'),
        FieldSpec('propertyType', 'PROP_DESC'),
        FieldSpec('creditGrade', 'CRED_GRADE'),
        FieldSpec('foundHome', 'SPEC_HOME'),
        FieldSpec('timelineToBuy', 'BUY_TIMEFRAME'),
        FieldSpec('estimatedHomeValue', 'EST_VAL', NUMERIC),
        FieldSpec('downPayment', 'DOWN_PMT', NUMERIC),
        FieldSpec('loanType', 'LOAN_TYPE'),
        FieldSpec('bankruptcyOrForeclosure', 'FHA_BANK_FORECLOSURE'),
        FieldSpec('currentlyEmployed', 'ANNUAL_VERIFIABLE_INCOME'),
        FieldSpec('lateMortgagePayments', 'NUM_MORTGAGE_LATES'),
        FieldSpec('veteranStatus', 'VA_STATUS'),
    ) + CONTACT_FIELDS,
    address_zip_key='Current_address_zip_code',
    credential_prefixes=('BUY_HOME',),
)

PRODUCTS = {
    REFINANCE.product: REFINANCE,
    BUY_HOME.product: BUY_HOME,
}
